"""Exception hierarchy for holiday resolution.

Lookup failures are also ``KeyError`` and validation failures are also
``ValueError``, so callers may catch either the specific class or the
built-in one.
"""

from __future__ import annotations

__all__ = [
    "DefinitionError",
    "HolidayError",
    "InvalidYearError",
    "UnknownCountryError",
    "UnknownHolidayError",
    "UnknownRegionError",
]


class HolidayError(Exception):
    """Base class for every error raised by statdays."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes.
        return self.message


class InvalidYearError(HolidayError, ValueError):
    """Year is not an integer in the supported range."""


class UnknownHolidayError(HolidayError, KeyError):
    """No holiday with the requested name exists in the table."""


class UnknownRegionError(HolidayError, KeyError):
    """Region code is not part of the country's region registry."""


class UnknownCountryError(HolidayError, KeyError):
    """Country code has no preset."""


class DefinitionError(HolidayError, ValueError):
    """A holiday definition table is malformed.

    Raised when a table is loaded (duplicate names, dangling or chained
    relative rules, bad month/day) and when a rule fails to resolve a date.
    """
