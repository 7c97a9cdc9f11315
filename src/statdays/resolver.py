"""Resolve holiday definitions into concrete dates for a year.

Resolution runs in three passes over the table:

1. every date rule is turned into a calendar date;
2. observance is computed for every holiday whose rule does not depend on a
   sibling, building a name -> observance date lookup;
3. ``RelativeTo`` holidays are resolved against that lookup.

Nothing is cached: each call builds fresh, immutable results.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping, Sequence
from typing import NamedTuple

from statdays import dates
from statdays.errors import DefinitionError, InvalidYearError
from statdays.rules import (
    Category,
    Computed,
    DateRule,
    Fixed,
    HolidayDefinition,
    NthWeekday,
    ObservanceRule,
    PostWeekendShift,
    Regions,
    RelativeTo,
    SameAsDate,
)

logger = logging.getLogger(__name__)

MIN_YEAR = 1900
MAX_YEAR = 2200


class ResolvedHoliday(NamedTuple):
    """A holiday with its date and observance date fixed for one year."""

    name: str
    date: datetime.date
    observance_date: datetime.date
    regions: Regions
    regional_names: Mapping[str, str]
    is_public_holiday: bool
    description: str | None
    categories: frozenset[Category]


def validate_year(year: object) -> int:
    """Return *year* unchanged if it is a supported year.

    Raises :class:`InvalidYearError` otherwise.
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(
            f"Invalid year {year!r}: expected an integer between {MIN_YEAR} and {MAX_YEAR}."
        )
    if year == 0:
        raise InvalidYearError("Year 0 does not exist in the Gregorian calendar.")
    if year < MIN_YEAR:
        raise InvalidYearError(f"Year must be {MIN_YEAR} or later, got {year}.")
    if year > MAX_YEAR:
        raise InvalidYearError(f"Year must be {MAX_YEAR} or earlier, got {year}.")
    return year


# ---------------------------------------------------------------------------
# Rule dispatch
# ---------------------------------------------------------------------------


def resolve_date(rule: DateRule, year: int) -> datetime.date:
    """Return the calendar date *rule* produces in *year*.

    Raises ``ValueError`` when the rule does not yield a valid date.
    """
    if isinstance(rule, Fixed):
        return datetime.date(year, rule.month, rule.day)
    if isinstance(rule, NthWeekday):
        return dates.nth_weekday_of_month(year, rule.month, rule.weekday, rule.occurrence)
    if isinstance(rule, Computed):
        calc = rule.calculator
        if calc.takes_date:
            if rule.month is None or rule.day is None:
                raise ValueError(f"Calculator {calc.name!r} needs a month and day")
            return calc.fn(datetime.date(year, rule.month, rule.day))
        return calc.fn(year)
    raise TypeError(f"Unsupported date rule: {rule!r}")


def resolve_observance(
    rule: ObservanceRule,
    base_date: datetime.date,
    siblings: Mapping[str, datetime.date],
) -> datetime.date:
    """Return the observance date for a holiday falling on *base_date*.

    *siblings* maps holiday names to their resolved observance dates and is
    only consulted for ``RelativeTo`` rules.
    """
    if isinstance(rule, SameAsDate):
        return base_date
    if isinstance(rule, PostWeekendShift):
        return dates.post_weekend_shift(base_date)
    if isinstance(rule, RelativeTo):
        try:
            anchor = siblings[rule.holiday]
        except KeyError:
            raise DefinitionError(
                f"Observance refers to {rule.holiday!r}, which has no resolved observance date"
            ) from None
        return rule.transform.fn(anchor)
    raise TypeError(f"Unsupported observance rule: {rule!r}")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def _resolve_dates(
    definitions: Sequence[HolidayDefinition], year: int
) -> list[datetime.date]:
    resolved: list[datetime.date] = []
    for defn in definitions:
        try:
            resolved.append(resolve_date(defn.date_rule, year))
        except ValueError as exc:
            raise DefinitionError(f"Cannot resolve date of {defn.name!r} in {year}: {exc}") from exc
    return resolved


def resolve_holidays(
    definitions: Sequence[HolidayDefinition],
    year: int,
    *,
    sort: bool = False,
) -> list[ResolvedHoliday]:
    """Resolve every definition for *year*.

    Results follow table order unless *sort* is true, in which case they are
    ordered by date (ties keep table order). Any failing rule fails the
    whole call.
    """
    validate_year(year)

    holiday_dates = _resolve_dates(definitions, year)
    logger.debug("Resolved %d holiday dates for %d", len(holiday_dates), year)

    observances: list[datetime.date | None] = [None] * len(definitions)
    siblings: dict[str, datetime.date] = {}
    for i, defn in enumerate(definitions):
        if isinstance(defn.observance_rule, RelativeTo):
            continue
        observed = resolve_observance(defn.observance_rule, holiday_dates[i], {})
        observances[i] = observed
        siblings[defn.name] = observed

    relative = 0
    for i, defn in enumerate(definitions):
        if not isinstance(defn.observance_rule, RelativeTo):
            continue
        observances[i] = resolve_observance(defn.observance_rule, holiday_dates[i], siblings)
        relative += 1
    logger.debug(
        "Resolved observance dates for %d: %d direct, %d relative",
        year,
        len(siblings),
        relative,
    )

    holidays = [
        ResolvedHoliday(
            name=defn.name,
            date=holiday_dates[i],
            observance_date=observances[i],  # type: ignore[arg-type]
            regions=defn.regions,
            regional_names=defn.regional_names,
            is_public_holiday=defn.is_public_holiday,
            description=defn.description,
            categories=defn.categories,
        )
        for i, defn in enumerate(definitions)
    ]
    if sort:
        holidays.sort(key=lambda h: h.date)
    return holidays
