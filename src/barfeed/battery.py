# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import logging
import pathlib
import re

from .commontypes import SourceError
from .feedtypes import BatteryConfig

logger = logging.getLogger(__name__)

PREFIX = "⚡"
POSTFIX = "%"
# "⚡100%"
BATTERY_LINE_MAX = len(PREFIX) + len("100") + len(POSTFIX)

# leading whitespace, then an optionally signed decimal integer; trailing content is ignored
CAPACITY_RE = re.compile(r"\s*([+-]?\d+)")


class BatteryReadError(SourceError):
    def __init__(self, path: pathlib.Path, reason: str, errno: int | None = None):
        self.path = path
        self.reason = reason
        self.errno = errno
        super().__init__(path, reason, errno)

    def __str__(self):
        if self.errno is not None:
            return f"Failed to open {self.path}. errno: {self.errno}, msg: {self.reason}"
        return f"Failed to read {self.path}. errno: n/a, msg: {self.reason}"


def read_capacity(path: pathlib.Path) -> int:
    try:
        contents = path.read_text(errors="replace")
    except OSError as exc:
        raise BatteryReadError(path, exc.strerror or str(exc), exc.errno) from exc
    if len(contents) == 0:
        raise BatteryReadError(path, "EOF")
    match = CAPACITY_RE.match(contents)
    if match is None:
        raise BatteryReadError(path, "no capacity value")
    return int(match.group(1))


def format_capacity(capacity: int) -> str:
    return f"{PREFIX}{capacity:3d}{POSTFIX}"


class BatteryReader:
    """Renders the current capacity of one battery each time it is called.

    The capacity file is opened and closed again on every call, so a battery that goes away shows up
    as a BatteryReadError on the next tick.
    """

    def __init__(self, config: BatteryConfig):
        self.path = config.source_path

    def __call__(self) -> str:
        capacity = read_capacity(self.path)
        logger.debug("capacity of %s: %d", self.path, capacity)
        return format_capacity(capacity)
