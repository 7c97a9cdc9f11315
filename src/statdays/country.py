"""A country's holiday table bound to its region registry."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable, Sequence

from statdays.errors import DefinitionError, UnknownHolidayError
from statdays.regions import Region, RegionalHoliday, filter_by_region, normalize_region
from statdays.resolver import ResolvedHoliday, resolve_holidays, validate_year
from statdays.rules import (
    Computed,
    ExceptRegions,
    Fixed,
    HolidayDefinition,
    InRegions,
    NthWeekday,
    RelativeTo,
    get_calculator,
    get_transform,
)

logger = logging.getLogger(__name__)

# Any leap year accepts every valid month/day, Feb 29 included.
_LEAP_YEAR = 2000


class Country:
    """Holiday definitions and subdivisions for one country.

    The table is checked once, here; a malformed table raises
    :class:`DefinitionError`. Instances hold no mutable state and may be
    shared freely.
    """

    def __init__(
        self,
        code: str,
        name: str,
        definitions: Iterable[HolidayDefinition],
        regions: Iterable[Region],
    ):
        self.code = code
        self.name = name
        self._definitions: tuple[HolidayDefinition, ...] = tuple(definitions)
        self._regions: tuple[Region, ...] = tuple(regions)
        self._region_codes = frozenset(r.code for r in self._regions)
        self._by_name = {d.name: d for d in self._definitions}

        _check_table(self._definitions, self._region_codes)
        logger.debug(
            "Loaded %s holiday table: %d holidays, %d regions",
            code,
            len(self._definitions),
            len(self._regions),
        )

    def __repr__(self) -> str:
        return f"Country(code={self.code!r}, name={self.name!r})"

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    @property
    def definitions(self) -> tuple[HolidayDefinition, ...]:
        return self._definitions

    def regions(self) -> list[Region]:
        return list(self._regions)

    def region_codes(self) -> frozenset[str]:
        return self._region_codes

    def holiday_names(self) -> list[str]:
        return [d.name for d in self._definitions]

    # ------------------------------------------------------------------
    # Holidays
    # ------------------------------------------------------------------

    def holidays(self, year: int, *, sort: bool = False) -> list[ResolvedHoliday]:
        """Every holiday in the table for *year*."""
        return resolve_holidays(self._definitions, year, sort=sort)

    def holiday(self, name: str, year: int) -> ResolvedHoliday:
        """Look up one holiday by canonical name.

        Raises :class:`UnknownHolidayError` when *name* is not in the table.
        """
        validate_year(year)
        if name not in self._by_name:
            raise UnknownHolidayError(f"Unknown holiday {name!r} for {self.name}")
        # Relative observance rules need their siblings, so resolve the table.
        return next(h for h in self.holidays(year) if h.name == name)

    def holidays_by_region(
        self, region: str, year: int, *, sort: bool = False
    ) -> list[RegionalHoliday]:
        """Holidays recognised in *region* for *year*, under their local names."""
        validate_year(year)
        code = normalize_region(region, self._region_codes)
        return filter_by_region(self.holidays(year, sort=sort), code, self._region_codes)

    def public_holidays(
        self, year: int, region: str | None = None
    ) -> list[ResolvedHoliday] | list[RegionalHoliday]:
        """Like :meth:`holidays` / :meth:`holidays_by_region`, public holidays only."""
        if region is None:
            return [h for h in self.holidays(year) if h.is_public_holiday]
        return [h for h in self.holidays_by_region(region, year) if h.is_public_holiday]

    def observance_dates(self, year: int, region: str | None = None) -> set[datetime.date]:
        """Observed dates of public holidays, as a set for membership tests."""
        return {h.observance_date for h in self.public_holidays(year, region)}


# ---------------------------------------------------------------------------
# Table validation
# ---------------------------------------------------------------------------


def _check_table(definitions: Sequence[HolidayDefinition], region_codes: frozenset[str]) -> None:
    seen: set[str] = set()
    for defn in definitions:
        if defn.name in seen:
            raise DefinitionError(f"Duplicate holiday name {defn.name!r}")
        seen.add(defn.name)

    relative = {d.name for d in definitions if isinstance(d.observance_rule, RelativeTo)}
    for defn in definitions:
        _check_date_rule(defn)
        rule = defn.observance_rule
        if isinstance(rule, RelativeTo):
            if get_transform(rule.transform.name) != rule.transform:
                raise DefinitionError(
                    f"{defn.name!r}: transform {rule.transform.name!r} is not the registered one"
                )
            if rule.holiday not in seen:
                raise DefinitionError(
                    f"{defn.name!r} is observed relative to unknown holiday {rule.holiday!r}"
                )
            if rule.holiday in relative:
                raise DefinitionError(
                    f"{defn.name!r} is observed relative to {rule.holiday!r}, "
                    "which is itself relative to another holiday"
                )
        _check_regions(defn, region_codes)


def _check_date_rule(defn: HolidayDefinition) -> None:
    rule = defn.date_rule
    if isinstance(rule, Fixed):
        _check_month_day(defn.name, rule.month, rule.day)
    elif isinstance(rule, NthWeekday):
        if not 1 <= rule.month <= 12:
            raise DefinitionError(f"{defn.name!r}: month {rule.month} out of range")
        if not 1 <= rule.weekday <= 7:
            raise DefinitionError(f"{defn.name!r}: weekday {rule.weekday} out of range 1-7")
        if not 1 <= rule.occurrence <= 4:
            raise DefinitionError(f"{defn.name!r}: occurrence {rule.occurrence} out of range 1-4")
    elif isinstance(rule, Computed):
        if get_calculator(rule.calculator.name) != rule.calculator:
            raise DefinitionError(
                f"{defn.name!r}: calculator {rule.calculator.name!r} is not the registered one"
            )
        has_date = rule.month is not None or rule.day is not None
        if rule.calculator.takes_date:
            if rule.month is None or rule.day is None:
                raise DefinitionError(
                    f"{defn.name!r}: calculator {rule.calculator.name!r} needs a month and day"
                )
            _check_month_day(defn.name, rule.month, rule.day)
        elif has_date:
            raise DefinitionError(
                f"{defn.name!r}: calculator {rule.calculator.name!r} takes only the year"
            )
    else:
        raise DefinitionError(f"{defn.name!r}: unsupported date rule {rule!r}")


def _check_month_day(name: str, month: int, day: int) -> None:
    try:
        datetime.date(_LEAP_YEAR, month, day)
    except ValueError as exc:
        raise DefinitionError(f"{name!r}: invalid month/day {month}/{day}: {exc}") from None


def _check_regions(defn: HolidayDefinition, region_codes: frozenset[str]) -> None:
    codes: set[str] = set(defn.regional_names)
    if isinstance(defn.regions, (InRegions, ExceptRegions)):
        codes |= defn.regions.codes
    unknown = codes - region_codes
    if unknown:
        raise DefinitionError(
            f"{defn.name!r} refers to unknown regions: {', '.join(sorted(unknown))}"
        )
