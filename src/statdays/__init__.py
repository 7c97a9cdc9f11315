"""Statutory holiday calculator.

Resolve declarative holiday tables into concrete dates for any year from
1900 to 2200, nationally or per province, territory or state.
"""

from statdays.countries import COUNTRIES, get_country, get_holidays, supported_countries
from statdays.country import Country
from statdays.errors import (
    DefinitionError,
    HolidayError,
    InvalidYearError,
    UnknownCountryError,
    UnknownHolidayError,
    UnknownRegionError,
)
from statdays.regions import Region, RegionalHoliday, RegionType
from statdays.resolver import ResolvedHoliday, resolve_holidays
from statdays.rules import HolidayDefinition

__all__ = [
    "COUNTRIES",
    "Country",
    "DefinitionError",
    "HolidayDefinition",
    "HolidayError",
    "InvalidYearError",
    "Region",
    "RegionType",
    "RegionalHoliday",
    "ResolvedHoliday",
    "UnknownCountryError",
    "UnknownHolidayError",
    "UnknownRegionError",
    "get_country",
    "get_holidays",
    "resolve_holidays",
    "supported_countries",
]
