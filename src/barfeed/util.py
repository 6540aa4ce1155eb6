# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import datetime

from dateutil.tz import tzlocal


def maybe_int(val: float):
    return int(val) if val.is_integer() else val


def now():
    return datetime.datetime.now(tzlocal())
