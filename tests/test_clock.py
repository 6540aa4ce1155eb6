import datetime

import pytest
from dateutil.tz import tzlocal

from barfeed.clock import TIME_LINE_MAX, ClockReader, format_time
from barfeed.feedtypes import ClockConfig

WHEN = datetime.datetime(2021, 3, 4, 5, 6, 7)


@pytest.mark.parametrize(
    "time_format,expected",
    (
        ("(%a %b %d %H:%M:%S)", "(Thu Mar 04 05:06:07)"),
        ("%H:%M", "05:06"),
        ("%Y-%m-%d", "2021-03-04"),
        ("", ""),
        # truncated to TIME_LINE_MAX characters
        ("%Y-%m-%dT%H:%M:%S and more", "2021-03-04T05:06:07 a"),
        ("%Y-%m-%d %H:%M:%S.%f", "2021-03-04 05:06:07.0"),
    ),
)
def test_format_time(time_format: str, expected: str):
    assert format_time(time_format, WHEN) == expected


def test_format_time_matches_strftime_up_to_the_limit():
    long_format = "%A, %d %B %Y at %H:%M:%S"
    rendered = format_time(long_format, WHEN)
    assert len(rendered) == TIME_LINE_MAX
    assert rendered == WHEN.strftime(long_format)[:TIME_LINE_MAX]


def test_reader_uses_configured_format():
    reader = ClockReader(ClockConfig(time_format="%H:%M:%S"), now=lambda: WHEN)
    assert reader() == "05:06:07"


def test_reader_default_is_local_time():
    reader = ClockReader(ClockConfig(time_format="%Y"))
    before = datetime.datetime.now(tzlocal()).year
    year = int(reader())
    after = datetime.datetime.now(tzlocal()).year
    assert before <= year <= after
