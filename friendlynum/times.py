"""Relative time descriptions such as '3 weeks ago' or '2 days from now'."""

import bisect
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta

__all__ = [
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "LONG_TIME",
    "RelTimeMagnitude",
    "DEFAULT_MAGNITUDES",
    "time_ago",
    "rel_time",
    "custom_rel_time",
]

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 12 * MONTH
LONG_TIME = 37 * YEAR

_SMALLEST = timedelta(microseconds=1)


@dataclass(frozen=True)
class RelTimeMagnitude:
    """A point at which relative time switches to a new format.

    ``d`` is the upper bound (exclusive) of the range this entry covers;
    a sequence of these must be in ascending order of ``d``. ``format``
    may contain ``%s``, replaced by the label (such as "ago"), and
    ``%d``, replaced by the time difference divided by ``div_by``.
    """

    d: timedelta
    format: str
    div_by: timedelta = _SMALLEST


DEFAULT_MAGNITUDES: tuple[RelTimeMagnitude, ...] = (
    RelTimeMagnitude(SECOND, "now", SECOND),
    RelTimeMagnitude(2 * SECOND, "1 second %s"),
    RelTimeMagnitude(MINUTE, "%d seconds %s", SECOND),
    RelTimeMagnitude(2 * MINUTE, "1 minute %s"),
    RelTimeMagnitude(HOUR, "%d minutes %s", MINUTE),
    RelTimeMagnitude(2 * HOUR, "1 hour %s"),
    RelTimeMagnitude(DAY, "%d hours %s", HOUR),
    RelTimeMagnitude(2 * DAY, "1 day %s"),
    RelTimeMagnitude(WEEK, "%d days %s", DAY),
    RelTimeMagnitude(2 * WEEK, "1 week %s"),
    RelTimeMagnitude(MONTH, "%d weeks %s", WEEK),
    RelTimeMagnitude(2 * MONTH, "1 month %s"),
    RelTimeMagnitude(YEAR, "%d months %s", MONTH),
    RelTimeMagnitude(18 * MONTH, "1 year %s"),
    RelTimeMagnitude(2 * YEAR, "2 years %s"),
    RelTimeMagnitude(LONG_TIME, "%d years %s", YEAR),
    RelTimeMagnitude(timedelta.max, "a long while %s"),
)

_VERB = re.compile(r"%(.)", re.DOTALL)


def _render(fmt: str, label: str, diff: timedelta, div_by: timedelta) -> str:
    def replace(match: re.Match) -> str:
        verb = match.group(1)
        if verb == "s":
            return label
        if verb == "d":
            return str(diff // div_by)
        if verb == "%":
            return "%"
        return match.group(0)

    return _VERB.sub(replace, fmt)


def time_ago(then: datetime) -> str:
    """Describe ``then`` relative to the current time, e.g. '3 weeks ago'."""
    return rel_time(then, datetime.now(then.tzinfo), "ago", "from now")


def rel_time(a: datetime, b: datetime, albl: str, blbl: str) -> str:
    """Describe the distance between two times with the default magnitudes.

    ``albl`` is used when ``a`` is the earlier time, ``blbl`` otherwise.
    """
    return custom_rel_time(a, b, albl, blbl, DEFAULT_MAGNITUDES)


def custom_rel_time(
    a: datetime,
    b: datetime,
    albl: str,
    blbl: str,
    magnitudes: Sequence[RelTimeMagnitude],
) -> str:
    """Describe the distance between two times with a custom magnitude table.

    Raises ValueError when ``magnitudes`` is empty.
    """
    if not magnitudes:
        raise ValueError("magnitudes must not be empty")
    label = albl
    diff = b - a
    if a > b:
        label = blbl
        diff = a - b
    index = bisect.bisect_right(magnitudes, diff, key=lambda m: m.d)
    magnitude = magnitudes[min(index, len(magnitudes) - 1)]
    return _render(magnitude.format, label, diff, magnitude.div_by)