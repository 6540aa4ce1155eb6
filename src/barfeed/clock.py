# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc
import datetime

from .feedtypes import ClockConfig
from .util import now as local_now

# status bars expect these short; the limit matches a 22-byte buffer less its terminator
TIME_LINE_MAX = 21


def format_time(time_format: str, when: datetime.datetime) -> str:
    return when.strftime(time_format)[:TIME_LINE_MAX]


class ClockReader:
    def __init__(self, config: ClockConfig, now: collections.abc.Callable[[], datetime.datetime] = local_now):
        self.time_format = config.time_format
        self.now = now

    def __call__(self) -> str:
        return format_time(self.time_format, self.now())
