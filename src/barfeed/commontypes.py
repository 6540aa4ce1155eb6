# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later


class BarfeedError(Exception):
    pass


class SourceError(BarfeedError):
    """A feeder could not obtain a value from its source."""
