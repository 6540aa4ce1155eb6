# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Functions to convert timedeltas to strings and back, using a string format based on Go's Duration format.

Feeder intervals are usually given as a bare number of seconds, but "500ms" or "1m30s" are accepted too.
Intervals are never negative, so neither are these durations.
"""
import datetime
import decimal
import re

from .util import maybe_int

PARSE_UNITS = {
    "us": datetime.timedelta(microseconds=1),
    "ms": datetime.timedelta(milliseconds=1),
    "s": datetime.timedelta(seconds=1),
    "m": datetime.timedelta(minutes=1),
    "h": datetime.timedelta(hours=1),
}

# alternation order matters: "ms" must win over "m"
DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?)(us|ms|s|m|h)")

NANOSECONDS_PER_MICROSECOND = 1000


def format_duration(val: datetime.timedelta) -> str:
    """Render a non-negative timedelta in the notation parse_duration reads."""
    if not val:
        return "0"
    if val < PARSE_UNITS["ms"]:
        # smallest timedelta resolution is 1us
        return f"{val.microseconds}us"
    if val < PARSE_UNITS["s"]:
        return f"{maybe_int(val / PARSE_UNITS['ms'])}ms"

    hours, val = divmod(val, PARSE_UNITS["h"])
    minutes, val = divmod(val, PARSE_UNITS["m"])
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if val:
        parts.append(f"{maybe_int(val.total_seconds())}s")
    return "".join(parts)


def parse_duration(val: str) -> datetime.timedelta:
    """Parse a duration such as "500ms", "1m30s" or "1.5h".

    Raises ValueError for malformed strings, and OverflowError for durations a timedelta cannot hold.
    """
    if len(val) == 0:
        raise ValueError("Empty duration string")
    if val == "0":
        return datetime.timedelta()

    accum = datetime.timedelta()
    pos = 0
    while pos < len(val):
        match = DURATION_PART_RE.match(val, pos)
        if match is None:
            raise ValueError(f"Invalid duration string; unexpected {val[pos:]!r}")
        number, unitstr = match.groups()
        # Decimal keeps "0.1s" exact; a float would not be
        num, denom = decimal.Decimal(number).as_integer_ratio()
        accum += PARSE_UNITS[unitstr] * num / denom
        pos = match.end()
    return accum


def split_seconds(val: datetime.timedelta) -> tuple[int, int]:
    """Split a non-negative timedelta into whole seconds and the remaining nanoseconds, the way a timespec holds it."""
    whole_seconds, remainder = divmod(val, PARSE_UNITS["s"])
    return whole_seconds, remainder.microseconds * NANOSECONDS_PER_MICROSECOND
