"""Declarative holiday definitions.

A holiday is described by a *date rule* (when it falls) and an *observance
rule* (when it is taken off), plus the set of regions that recognise it.
Both rule kinds are closed unions; the resolver dispatches on them.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

from statdays import dates
from statdays.errors import DefinitionError

# ---------------------------------------------------------------------------
# Named calendar functions
# ---------------------------------------------------------------------------


class Calculator(NamedTuple):
    """A named date function usable by :class:`Computed` rules.

    Year-form calculators are called with the year; date-form calculators
    with ``date(year, month, day)`` built from the rule.
    """

    name: str
    fn: Callable[..., datetime.date]
    takes_date: bool = False


PASCHAL_SUNDAY = Calculator("paschal_sunday", dates.paschal_sunday)
GOOD_FRIDAY = Calculator("good_friday", dates.good_friday)
EASTER_MONDAY = Calculator("easter_monday", dates.easter_monday)
CLOSEST_MONDAY = Calculator("closest_monday", dates.closest_monday, takes_date=True)
MONDAY_BEFORE = Calculator("monday_before", dates.monday_before, takes_date=True)

CALCULATORS: dict[str, Calculator] = {
    c.name: c for c in (PASCHAL_SUNDAY, GOOD_FRIDAY, EASTER_MONDAY, CLOSEST_MONDAY, MONDAY_BEFORE)
}


class Transform(NamedTuple):
    """A named function mapping a sibling's observance date to a new date."""

    name: str
    fn: Callable[[datetime.date], datetime.date]


DAY_AFTER_SKIPPING_WEEKEND = Transform(
    "day_after_skipping_weekend", dates.day_after_skipping_weekend
)

TRANSFORMS: dict[str, Transform] = {t.name: t for t in (DAY_AFTER_SKIPPING_WEEKEND,)}


def get_calculator(name: str) -> Calculator:
    try:
        return CALCULATORS[name]
    except KeyError:
        supported = ", ".join(sorted(CALCULATORS))
        raise DefinitionError(f"Unknown calculator {name!r}. Supported: {supported}") from None


def get_transform(name: str) -> Transform:
    try:
        return TRANSFORMS[name]
    except KeyError:
        supported = ", ".join(sorted(TRANSFORMS))
        raise DefinitionError(f"Unknown transform {name!r}. Supported: {supported}") from None


# ---------------------------------------------------------------------------
# Date rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fixed:
    """Same month and day every year."""

    month: int
    day: int


@dataclass(frozen=True)
class NthWeekday:
    """The *occurrence*-th *weekday* (1 = Monday) of *month*, occurrence 1–4."""

    month: int
    weekday: int
    occurrence: int


@dataclass(frozen=True)
class Computed:
    """A date produced by a registered :class:`Calculator`."""

    calculator: Calculator
    month: int | None = None
    day: int | None = None


DateRule = Fixed | NthWeekday | Computed

# ---------------------------------------------------------------------------
# Observance rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SameAsDate:
    """Observed on the holiday's own date."""


@dataclass(frozen=True)
class PostWeekendShift:
    """Saturday and Sunday dates are observed on the following Monday."""


@dataclass(frozen=True)
class RelativeTo:
    """Observed on *transform* applied to another holiday's observance date."""

    holiday: str
    transform: Transform


ObservanceRule = SameAsDate | PostWeekendShift | RelativeTo

# ---------------------------------------------------------------------------
# Region applicability
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AllRegions:
    """Recognised in every region of the country."""

    def includes(self, region: str) -> bool:
        return True


@dataclass(frozen=True)
class InRegions:
    """Recognised only in the listed regions."""

    codes: frozenset[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", frozenset(self.codes))

    def includes(self, region: str) -> bool:
        return region in self.codes


@dataclass(frozen=True)
class ExceptRegions:
    """Recognised everywhere but the listed regions."""

    codes: frozenset[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", frozenset(self.codes))

    def includes(self, region: str) -> bool:
        return region not in self.codes


Regions = AllRegions | InRegions | ExceptRegions


def only(*codes: str) -> InRegions:
    return InRegions(frozenset(codes))


def all_except(*codes: str) -> ExceptRegions:
    return ExceptRegions(frozenset(codes))


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


class Category(str, Enum):
    NATIONAL = "national"
    FEDERAL = "federal"
    REGIONAL = "regional"
    RELIGIOUS = "religious"
    OTHER = "other"


class HolidayDefinition(NamedTuple):
    """One row of a country's holiday table."""

    name: str
    date_rule: DateRule
    observance_rule: ObservanceRule = SameAsDate()
    regions: Regions = AllRegions()
    regional_names: Mapping[str, str] = MappingProxyType({})
    is_public_holiday: bool = True
    description: str | None = None
    categories: frozenset[Category] = frozenset()


def define(
    name: str,
    date_rule: DateRule,
    observance_rule: ObservanceRule | None = None,
    *,
    regions: Regions | None = None,
    regional_names: Mapping[str, str] | None = None,
    is_public_holiday: bool = True,
    description: str | None = None,
    categories: Iterable[Category] = (),
) -> HolidayDefinition:
    """Build a :class:`HolidayDefinition` with read-only collections."""
    return HolidayDefinition(
        name=name,
        date_rule=date_rule,
        observance_rule=observance_rule if observance_rule is not None else SameAsDate(),
        regions=regions if regions is not None else AllRegions(),
        regional_names=MappingProxyType(dict(regional_names or {})),
        is_public_holiday=is_public_holiday,
        description=description,
        categories=frozenset(categories),
    )
