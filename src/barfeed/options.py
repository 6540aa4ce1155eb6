# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import datetime
import math
import sys
import typing

from .durations import parse_duration
from .feedtypes import DEFAULT_BATTERY, DEFAULT_INTERVAL, DEFAULT_TIME_FORMAT, BatteryConfig, ClockConfig

EXIT_USAGE = 1


class BarfeedArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> typing.NoReturn:
        # exit status 1 rather than argparse's 2
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def parse_interval(val: str) -> datetime.timedelta:
    """Parse an interval given either as a number of seconds ("0.5") or as a duration string ("500ms")."""
    try:
        seconds = float(val)
    except ValueError:
        try:
            interval = parse_duration(val)
        except (ValueError, OverflowError) as exc:
            raise argparse.ArgumentTypeError(f"invalid interval {val!r}: {exc}") from exc
    else:
        if not math.isfinite(seconds):
            raise argparse.ArgumentTypeError(f"invalid interval {val!r}: must be finite")
        try:
            interval = datetime.timedelta(seconds=seconds)
        except OverflowError as exc:
            raise argparse.ArgumentTypeError(f"invalid interval {val!r}: too large") from exc
    if interval < datetime.timedelta():
        raise argparse.ArgumentTypeError(f"invalid interval {val!r}: must not be negative")
    return interval


def _add_help_argument(parser: argparse.ArgumentParser):
    # only the short flag; add_help=True would also register --help
    parser.add_argument("-h", action="help", help="show this help message and exit")


def _add_interval_argument(parser: argparse.ArgumentParser):
    parser.add_argument(
        "-i",
        dest="interval",
        metavar="SECONDS",
        type=parse_interval,
        default=DEFAULT_INTERVAL,
        help="seconds to sleep between lines; fractions and durations like 500ms are allowed (default: 1)",
    )


def battery_parser(prog: str = "barfeed-battery") -> BarfeedArgumentParser:
    parser = BarfeedArgumentParser(
        prog=prog, description="Print the charge level of a battery, once per interval.", add_help=False
    )
    _add_help_argument(parser)
    parser.add_argument(
        "-b",
        dest="battery",
        metavar="NAME",
        default=DEFAULT_BATTERY,
        help=f"battery name from /sys/class/power_supply/ (default: {DEFAULT_BATTERY})",
    )
    _add_interval_argument(parser)
    return parser


def clock_parser(prog: str = "barfeed-time") -> BarfeedArgumentParser:
    parser = BarfeedArgumentParser(prog=prog, description="Print the current local time, once per interval.", add_help=False)
    _add_help_argument(parser)
    parser.add_argument(
        "-f",
        dest="time_format",
        metavar="FORMAT",
        default=DEFAULT_TIME_FORMAT,
        # argparse %-formats help strings
        help="strftime format string (default: %(default)r)",
    )
    _add_interval_argument(parser)
    return parser


def parse_battery_args(argv: typing.Optional[typing.Sequence[str]] = None) -> BatteryConfig:
    args = battery_parser().parse_args(argv)
    return BatteryConfig(interval=args.interval, battery=args.battery)


def parse_clock_args(argv: typing.Optional[typing.Sequence[str]] = None) -> ClockConfig:
    args = clock_parser().parse_args(argv)
    return ClockConfig(interval=args.interval, time_format=args.time_format)
