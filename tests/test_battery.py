import errno
import pathlib

import pytest

from barfeed.battery import BATTERY_LINE_MAX, BatteryReader, BatteryReadError, format_capacity, read_capacity
from barfeed.commontypes import SourceError
from barfeed.feedtypes import BatteryConfig


@pytest.mark.parametrize(
    "capacity,expected",
    (
        (0, "⚡  0%"),
        (7, "⚡  7%"),
        (42, "⚡ 42%"),
        (82, "⚡ 82%"),
        (100, "⚡100%"),
    ),
)
def test_format_capacity(capacity: int, expected: str):
    assert format_capacity(capacity) == expected


def test_format_capacity_fits_for_all_percentages():
    for capacity in range(0, 101):
        line = format_capacity(capacity)
        assert len(line) == BATTERY_LINE_MAX
        assert line.startswith("⚡")
        assert line.endswith("%")
        assert int(line[1:-1]) == capacity


@pytest.mark.parametrize(
    "contents,expected",
    (
        ("82\n", 82),
        ("100\n", 100),
        ("0", 0),
        ("  57 and then some", 57),
        ("\n9\n", 9),
        ("+12\n", 12),
    ),
)
def test_read_capacity(tmp_path: pathlib.Path, contents: str, expected: int):
    path = tmp_path / "capacity"
    path.write_text(contents)
    assert read_capacity(path) == expected


@pytest.mark.parametrize(
    "contents,reason",
    (
        ("", "EOF"),
        ("full\n", "no capacity value"),
        ("\n\n", "no capacity value"),
    ),
)
def test_read_capacity_unparsable(tmp_path: pathlib.Path, contents: str, reason: str):
    path = tmp_path / "capacity"
    path.write_text(contents)
    with pytest.raises(BatteryReadError) as excinfo:
        read_capacity(path)
    e = excinfo.value
    assert e.path == path
    assert e.reason == reason
    assert e.errno is None
    assert str(e) == f"Failed to read {path}. errno: n/a, msg: {reason}"


def test_read_capacity_missing(tmp_path: pathlib.Path):
    path = tmp_path / "BAT9" / "capacity"
    with pytest.raises(SourceError) as excinfo:
        read_capacity(path)
    e = excinfo.value
    assert isinstance(e, BatteryReadError)
    assert e.errno == errno.ENOENT
    assert str(e) == f"Failed to open {path}. errno: {errno.ENOENT}, msg: No such file or directory"


def test_reader_rereads_every_tick(tmp_path: pathlib.Path):
    battery_dir = tmp_path / "BAT1"
    battery_dir.mkdir()
    capacity = battery_dir / "capacity"
    config = BatteryConfig(battery="BAT1", power_supply_dir=tmp_path)
    reader = BatteryReader(config)
    assert reader.path == capacity

    capacity.write_text("82\n")
    assert reader() == "⚡ 82%"
    capacity.write_text("81\n")
    assert reader() == "⚡ 81%"
    capacity.unlink()
    with pytest.raises(BatteryReadError):
        reader()
