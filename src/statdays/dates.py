"""Calendar arithmetic used by holiday rules.

Weekdays follow ISO numbering throughout: 1 = Monday … 7 = Sunday.
"""

from __future__ import annotations

import calendar
import datetime

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(1, 8)

# ---------------------------------------------------------------------------
# Weekdays
# ---------------------------------------------------------------------------


def weekday_index(d: datetime.date) -> int:
    """Return the ISO weekday of *d* (1 = Monday … 7 = Sunday)."""
    return d.isoweekday()


def nth_weekday_of_month(year: int, month: int, weekday: int, occurrence: int) -> datetime.date:
    """Return the *occurrence*-th *weekday* in *month* of *year*.

    *occurrence* is 1-based and counted from the start of the month.
    Raises ``ValueError`` when the month has fewer matching weekdays.
    """
    days_in_month = calendar.monthrange(year, month)[1]
    matches = [
        d
        for d in (datetime.date(year, month, day) for day in range(1, days_in_month + 1))
        if weekday_index(d) == weekday
    ]
    if occurrence < 1 or occurrence > len(matches):
        msg = (
            f"No occurrence {occurrence} of weekday {weekday} in {year}-{month:02d} "
            f"(found {len(matches)})"
        )
        raise ValueError(msg)
    return matches[occurrence - 1]


def closest_monday(d: datetime.date) -> datetime.date:
    """Return the Monday nearest to *d*.

    Tuesday to Thursday fall back to the Monday of the same week; Friday to
    Sunday move forward to the next week's Monday.
    """
    idx = weekday_index(d)
    start_of_week = d - datetime.timedelta(days=idx - MONDAY)
    if idx <= THURSDAY:
        return start_of_week
    return start_of_week + datetime.timedelta(weeks=1)


def monday_before(d: datetime.date) -> datetime.date:
    """Return the last Monday strictly before *d*."""
    delta = (weekday_index(d) - MONDAY) % 7 or 7
    return d - datetime.timedelta(days=delta)


# ---------------------------------------------------------------------------
# Paschal dates
# ---------------------------------------------------------------------------


def paschal_sunday(year: int) -> datetime.date:
    """Return Western Easter Sunday for *year* (Meeus/Jones/Butcher)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return datetime.date(year, month, day)


def good_friday(year: int) -> datetime.date:
    return paschal_sunday(year) - datetime.timedelta(days=2)


def easter_monday(year: int) -> datetime.date:
    return paschal_sunday(year) + datetime.timedelta(days=1)


# ---------------------------------------------------------------------------
# Observance shifts
# ---------------------------------------------------------------------------


def post_weekend_shift(d: datetime.date) -> datetime.date:
    """Shift a weekend date to the following Monday (Sat→+2, Sun→+1)."""
    idx = weekday_index(d)
    if idx == SATURDAY:
        return d + datetime.timedelta(days=2)
    if idx == SUNDAY:
        return d + datetime.timedelta(days=1)
    return d


def day_after_skipping_weekend(d: datetime.date) -> datetime.date:
    """Return the next working day after *d*, assuming *d* is itself one.

    A Friday moves to the following Monday; anything else to the next day.
    """
    if weekday_index(d) == FRIDAY:
        return d + datetime.timedelta(days=3)
    return d + datetime.timedelta(days=1)
