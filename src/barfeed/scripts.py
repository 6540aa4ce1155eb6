# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import datetime
import logging
import os
import signal
import sys
import typing

import trio

from .battery import BATTERY_LINE_MAX, BatteryReader, BatteryReadError
from .clock import TIME_LINE_MAX, ClockReader
from .durations import format_duration, split_seconds
from .loop import Renderer, emit_forever
from .options import parse_battery_args, parse_clock_args

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "BARFEED_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def configure_logging(environ: typing.Mapping[str, str] = os.environ):
    level_name = environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    known = isinstance(level, int)
    logging.basicConfig(stream=sys.stderr, level=level if known else DEFAULT_LOG_LEVEL, format=LOG_FORMAT)
    if not known:
        logger.warning("Unknown log level %r in %s; using %s", level_name, LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)


def trace_interval(interval: datetime.timedelta):
    seconds, nanoseconds = split_seconds(interval)
    logger.debug("interval: %s (tv_sec = %d, tv_nsec = %d)", format_duration(interval), seconds, nanoseconds)


def _silence_stdout():
    # Keeps the interpreter's final flush of stdout from failing again.
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def run_feeder(render: Renderer, interval: datetime.timedelta, stream: typing.Optional[typing.TextIO] = None) -> int:
    """Run the emit loop until it stops, and turn the way it stopped into an exit status.

    A consumer that closes its end of the pipe stops the feeder with a failure status instead of
    leaving it writing into nothing. Errors from the renderer propagate.
    """
    # Python already ignores SIGPIPE, but don't depend on whoever embedded us.
    signal.signal(signal.SIGPIPE, signal.SIG_IGN)
    try:
        trio.run(emit_forever, render, interval, stream)
    except KeyboardInterrupt:
        logger.debug("interrupted")
        return EXIT_SUCCESS
    except BrokenPipeError:
        logger.debug("output consumer went away")
        if stream is None:
            _silence_stdout()
        return EXIT_FAILURE
    except OSError as exc:
        logger.error("Failed to write output: %s", exc)
        return EXIT_FAILURE
    return EXIT_SUCCESS


def battery_cli(argv: typing.Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv
    configure_logging()
    config = parse_battery_args(argv[1:])
    logger.debug("line max: %d", BATTERY_LINE_MAX)
    logger.debug("battery: %r", config.battery)
    logger.debug("source path: %s", config.source_path)
    trace_interval(config.interval)
    try:
        return run_feeder(BatteryReader(config), config.interval)
    except BatteryReadError as exc:
        logger.critical("%s", exc)
        return EXIT_FAILURE


def time_cli(argv: typing.Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv
    configure_logging()
    config = parse_clock_args(argv[1:])
    logger.debug("line max: %d", TIME_LINE_MAX)
    logger.debug("time format: %r", config.time_format)
    trace_interval(config.interval)
    return run_feeder(ClockReader(config), config.interval)
