"""Subdivision registry types and per-region holiday views."""

from __future__ import annotations

import datetime
from collections.abc import Collection, Iterable
from enum import Enum
from typing import NamedTuple

from statdays.errors import UnknownRegionError
from statdays.resolver import ResolvedHoliday
from statdays.rules import Category


class RegionType(str, Enum):
    PROVINCE = "province"
    TERRITORY = "territory"
    STATE = "state"
    OTHER = "other"


class Region(NamedTuple):
    """A first-level subdivision of a country."""

    name: str
    region_type: RegionType
    code: str
    reference_url: str = ""


class RegionalHoliday(NamedTuple):
    """A holiday as seen from one region, with its local display name.

    ``name`` holds the display name (``"Louis Riel Day (Family Day)"`` when
    the region overrides it) and ``region`` the normalized region code.
    """

    name: str
    date: datetime.date
    observance_date: datetime.date
    region: str
    categories: frozenset[Category]
    description: str | None
    is_public_holiday: bool


def normalize_region(region: str, region_codes: Collection[str]) -> str:
    """Return the registry form of *region*.

    Codes are matched case-insensitively. Raises :class:`UnknownRegionError`
    for codes outside *region_codes*.
    """
    if not isinstance(region, str):
        raise UnknownRegionError(
            f"Invalid region {region!r}: expected a region code string, "
            f"got {type(region).__name__}."
        )
    code = region.strip().lower()
    if code not in region_codes:
        supported = ", ".join(sorted(region_codes))
        raise UnknownRegionError(f"Unknown region {region!r}. Supported: {supported}")
    return code


def display_name(holiday: ResolvedHoliday, region: str) -> str:
    """Return the name *holiday* is known by in *region*.

    A regional override is shown alongside the canonical name, e.g.
    ``"Louis Riel Day (Family Day)"``.
    """
    local = holiday.regional_names.get(region)
    if local is None:
        return holiday.name
    return f"{local} ({holiday.name})"


def localize(holiday: ResolvedHoliday, region: str) -> RegionalHoliday:
    return RegionalHoliday(
        name=display_name(holiday, region),
        date=holiday.date,
        observance_date=holiday.observance_date,
        region=region,
        categories=holiday.categories,
        description=holiday.description,
        is_public_holiday=holiday.is_public_holiday,
    )


def filter_by_region(
    holidays: Iterable[ResolvedHoliday],
    region: str,
    region_codes: Collection[str],
) -> list[RegionalHoliday]:
    """Return the holidays recognised in *region*, renamed for that region.

    Input order is preserved. An unknown *region* raises
    :class:`UnknownRegionError` rather than producing an empty list.
    """
    code = normalize_region(region, region_codes)
    return [localize(h, code) for h in holidays if h.regions.includes(code)]
