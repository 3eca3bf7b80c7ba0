from datetime import datetime, timedelta, timezone

import pytest

from friendlynum.times import (
    DAY,
    LONG_TIME,
    MONTH,
    WEEK,
    YEAR,
    RelTimeMagnitude,
    custom_rel_time,
    rel_time,
    time_ago,
)

NOW = datetime(2020, 6, 15, 12, 0, 0)
EPOCH = datetime(1970, 1, 1)
S = timedelta(seconds=1)
MIN = timedelta(minutes=1)
H = timedelta(hours=1)
QUARTER = timedelta(milliseconds=250)


@pytest.mark.parametrize(
    "offset, expected",
    [
        (timedelta(0), "now"),
        (1 * S, "1 second ago"),
        (12 * S, "12 seconds ago"),
        (30 * S, "30 seconds ago"),
        (45 * S, "45 seconds ago"),
        (63 * S, "1 minute ago"),
        (15 * MIN, "15 minutes ago"),
        (63 * MIN, "1 hour ago"),
        (2 * H, "2 hours ago"),
        (21 * H, "21 hours ago"),
        (26 * H, "1 day ago"),
        (49 * H, "2 days ago"),
        (3 * DAY, "3 days ago"),
        (7 * DAY, "1 week ago"),
        (12 * DAY, "1 week ago"),
        (15 * DAY, "2 weeks ago"),
        (39 * DAY, "1 month ago"),
        (99 * DAY, "3 months ago"),
        (365 * DAY, "1 year ago"),
        (400 * DAY, "1 year ago"),
        (548 * DAY, "2 years ago"),
        (725 * DAY, "2 years ago"),
        (800 * DAY, "2 years ago"),
        (3 * YEAR, "3 years ago"),
        (LONG_TIME, "a long while ago"),
    ],
)
def test_past(offset, expected):
    assert rel_time(NOW - offset, NOW, "ago", "from now") == expected


@pytest.mark.parametrize(
    "offset, expected",
    [
        (timedelta(0), "now"),
        (1 * S, "1 second from now"),
        (12 * S, "12 seconds from now"),
        (30 * S, "30 seconds from now"),
        (45 * S, "45 seconds from now"),
        (15 * MIN, "15 minutes from now"),
        (2 * H, "2 hours from now"),
        (21 * H, "21 hours from now"),
        (26 * H, "1 day from now"),
        (49 * H, "2 days from now"),
        (3 * DAY, "3 days from now"),
        (7 * DAY, "1 week from now"),
        (12 * DAY, "1 week from now"),
        (15 * DAY, "2 weeks from now"),
        (30 * DAY, "1 month from now"),
        (365 * DAY, "1 year from now"),
        (2 * YEAR, "2 years from now"),
        (LONG_TIME, "a long while from now"),
    ],
)
def test_future(offset, expected):
    assert rel_time(NOW + QUARTER + offset, NOW, "ago", "from now") == expected


@pytest.mark.parametrize(
    "end, expected",
    [
        (EPOCH + 7 * DAY - timedelta(microseconds=1), "6 days ago"),
        (EPOCH + 7 * DAY, "1 week ago"),
        (EPOCH + 7 * DAY + timedelta(microseconds=1), "1 week ago"),
        (EPOCH + 14 * DAY - timedelta(microseconds=1), "1 week ago"),
        (EPOCH + 14 * DAY, "2 weeks ago"),
        (EPOCH + 14 * DAY + timedelta(microseconds=1), "2 weeks ago"),
    ],
)
def test_rel_time_off_by_one(end, expected):
    assert rel_time(EPOCH, end, "ago", "") == expected


def test_range_extremes():
    assert rel_time(datetime.max, datetime.min, "ago", "from now") == "a long while from now"
    assert rel_time(datetime.min, datetime.max, "ago", "from now") == "a long while ago"


CUSTOM = [
    RelTimeMagnitude(S, "now", S),
    RelTimeMagnitude(2 * S, "1 second %s", timedelta(microseconds=1)),
    RelTimeMagnitude(MIN, "%d seconds %s", S),
    RelTimeMagnitude(DAY - S, "%d minutes %s", MIN),
    RelTimeMagnitude(DAY, "%d hours %s", H),
    RelTimeMagnitude(2 * DAY, "1 day %s", timedelta(microseconds=1)),
    RelTimeMagnitude(WEEK, "%d days %s", DAY),
    RelTimeMagnitude(2 * WEEK, "1 week %s", timedelta(microseconds=1)),
    RelTimeMagnitude(6 * MONTH, "%d weeks %s", WEEK),
    RelTimeMagnitude(YEAR, "%d months %s", MONTH),
]


@pytest.mark.parametrize(
    "offset, expected",
    [
        (timedelta(0), "now"),
        (1 * S, "1 second from now"),
        (12 * S, "12 seconds from now"),
        (30 * S, "30 seconds from now"),
        (45 * S, "45 seconds from now"),
        (15 * MIN, "15 minutes from now"),
        (2 * H, "120 minutes from now"),
        (21 * H, "1260 minutes from now"),
        (26 * H, "1 day from now"),
        (49 * H, "2 days from now"),
        (3 * DAY, "3 days from now"),
        (7 * DAY, "1 week from now"),
        (12 * DAY, "1 week from now"),
        (15 * DAY, "2 weeks from now"),
        (30 * DAY, "4 weeks from now"),
        (6 * MONTH - S, "25 weeks from now"),
        (365 * DAY, "12 months from now"),
        (2 * YEAR, "24 months from now"),
        (LONG_TIME, "444 months from now"),
    ],
)
def test_custom_rel_time(offset, expected):
    then = NOW + QUARTER + offset
    assert custom_rel_time(then, NOW, "ago", "from now", CUSTOM) == expected


def test_custom_rel_time_percent_escape():
    table = [RelTimeMagnitude(timedelta.max, "100%% %s")]
    assert custom_rel_time(EPOCH, NOW, "ago", "later", table) == "100% ago"


def test_custom_rel_time_empty_table():
    with pytest.raises(ValueError):
        custom_rel_time(EPOCH, NOW, "ago", "later", [])


def test_time_ago_naive():
    then = datetime.now() - 45 * S
    assert time_ago(then) == "45 seconds ago"


def test_time_ago_aware_future():
    then = datetime.now(timezone.utc) + 3 * DAY + H
    assert time_ago(then) == "3 days from now"