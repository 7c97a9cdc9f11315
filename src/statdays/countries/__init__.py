"""Built-in country presets.

Each preset is built once, on first use, and shared afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cache

from statdays.countries import canada
from statdays.country import Country
from statdays.errors import UnknownCountryError
from statdays.regions import RegionalHoliday
from statdays.resolver import ResolvedHoliday

COUNTRIES: dict[str, str] = {
    canada.CODE: canada.NAME,
}

_BUILDERS: dict[str, Callable[[], Country]] = {
    canada.CODE: canada.build,
}


def supported_countries() -> list[tuple[str, str]]:
    """``(code, name)`` pairs for every preset, sorted by code."""
    return sorted(COUNTRIES.items())


def get_country(code: str) -> Country:
    """Return the preset for *code* (case-insensitive).

    Raises :class:`UnknownCountryError` if the country is not supported.
    """
    key = code.strip().lower()
    if key not in _BUILDERS:
        supported = ", ".join(sorted(COUNTRIES))
        raise UnknownCountryError(f"Unknown country preset {code!r}. Supported: {supported}")
    return _load(key)


@cache
def _load(code: str) -> Country:
    return _BUILDERS[code]()


def get_holidays(
    country: str, year: int, region: str | None = None
) -> list[ResolvedHoliday] | list[RegionalHoliday]:
    """Holidays of *country* for *year*, narrowed to *region* when given."""
    preset = get_country(country)
    if region is None:
        return preset.holidays(year)
    return preset.holidays_by_region(region, year)
