# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import datetime
import pathlib

import msgspec

DEFAULT_INTERVAL = datetime.timedelta(seconds=1)
DEFAULT_BATTERY = "BAT0"
DEFAULT_TIME_FORMAT = "(%a %b %d %H:%M:%S)"
POWER_SUPPLY_DIR = pathlib.Path("/sys/class/power_supply")


class BatteryConfig(msgspec.Struct, frozen=True, kw_only=True):
    interval: datetime.timedelta = DEFAULT_INTERVAL
    battery: str = DEFAULT_BATTERY
    power_supply_dir: pathlib.Path = POWER_SUPPLY_DIR

    @property
    def source_path(self) -> pathlib.Path:
        return self.power_supply_dir / self.battery / "capacity"


class ClockConfig(msgspec.Struct, frozen=True, kw_only=True):
    interval: datetime.timedelta = DEFAULT_INTERVAL
    time_format: str = DEFAULT_TIME_FORMAT
