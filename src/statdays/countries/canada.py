"""Canadian statutory holidays and observances.

Each province and territory sets its own holiday schedule; the table below
records which of them recognise each holiday and under what local name.
"""

from __future__ import annotations

from statdays.country import Country
from statdays.dates import FRIDAY, MONDAY
from statdays.regions import Region, RegionType
from statdays.rules import (
    CLOSEST_MONDAY,
    DAY_AFTER_SKIPPING_WEEKEND,
    EASTER_MONDAY,
    GOOD_FRIDAY,
    MONDAY_BEFORE,
    PASCHAL_SUNDAY,
    Category,
    Computed,
    Fixed,
    HolidayDefinition,
    InRegions,
    NthWeekday,
    PostWeekendShift,
    RelativeTo,
    all_except,
    define,
    only,
)

CODE = "ca"
NAME = "Canada"

NATIONAL = Category.NATIONAL
REGIONAL = Category.REGIONAL
RELIGIOUS = Category.RELIGIOUS

PROVINCE = RegionType.PROVINCE
TERRITORY = RegionType.TERRITORY

_EASTER_CHOICE = (
    "In Quebec, employers must choose between Good Friday and Easter Monday "
    "for their statutory holiday"
)
_NS_RETAIL = "Retail stores are closed in Nova Scotia (ns)"


def regions() -> list[Region]:
    return [
        Region("Alberta", PROVINCE, "ab", "https://www.alberta.ca/alberta-general-holidays"),
        Region(
            "British Columbia",
            PROVINCE,
            "bc",
            "https://www.gov.bc.ca/gov/content/employment-business/employment-standards-advice/"
            "employment-standards/statutory-holidays",
        ),
        Region(
            "Manitoba",
            PROVINCE,
            "mb",
            "https://www.gov.mb.ca/labour/standards/doc,gen-holidays-after-april-30-07,factsheet.html",
        ),
        Region("New Brunswick", PROVINCE, "nb"),
        Region(
            "Newfoundland and Labrador",
            PROVINCE,
            "nl",
            "https://www.gov.nl.ca/exec/tbs/2024-paid-holidays-2/",
        ),
        Region("Northwest Territories", TERRITORY, "nt"),
        Region(
            "Nova Scotia",
            PROVINCE,
            "ns",
            "https://novascotia.ca/lae/employmentrights/holidaychart.asp",
        ),
        Region("Nunavut", TERRITORY, "nu", "https://nu-lsco.ca/faq-s?tmpl=component&faqid=11"),
        Region(
            "Ontario",
            PROVINCE,
            "on",
            "https://www.ontario.ca/document/your-guide-employment-standards-act-0/public-holidays",
        ),
        Region("Prince Edward Island", PROVINCE, "pe"),
        Region("Québec", PROVINCE, "qc", "https://educaloi.qc.ca/en/capsules/public-holidays/"),
        Region("Saskatchewan", PROVINCE, "sk"),
        Region(
            "Yukon",
            TERRITORY,
            "yt",
            "https://yukon.ca/en/doing-business/employer-responsibilities/find-yukon-statutory-holiday",
        ),
    ]


def definitions() -> list[HolidayDefinition]:
    return [
        define(
            "New Year's Day",
            Fixed(1, 1),
            PostWeekendShift(),
            categories=[NATIONAL],
        ),
        define(
            "Family Day",
            NthWeekday(2, MONDAY, 3),
            PostWeekendShift(),
            regions=only("ab", "bc", "nb", "on", "sk", "mb", "ns", "pe"),
            regional_names={
                "mb": "Louis Riel Day",
                "ns": "Heritage Day",
                "pe": "Islander Day",
            },
            categories=[REGIONAL],
        ),
        define(
            "St. Patrick's Day",
            Computed(CLOSEST_MONDAY, 3, 17),
            regions=only("nl"),
            is_public_holiday=False,
            categories=[REGIONAL, RELIGIOUS],
        ),
        define(
            "Good Friday",
            Computed(GOOD_FRIDAY),
            PostWeekendShift(),
            description=_EASTER_CHOICE,
            categories=[NATIONAL, RELIGIOUS],
        ),
        define(
            "Easter Sunday",
            Computed(PASCHAL_SUNDAY),
            regions=InRegions(frozenset()),
            is_public_holiday=False,
            categories=[RELIGIOUS],
        ),
        define(
            "Easter Monday",
            Computed(EASTER_MONDAY),
            regions=InRegions(frozenset()),
            description=_EASTER_CHOICE,
            categories=[NATIONAL, RELIGIOUS],
        ),
        define(
            "St. George's Day",
            Computed(CLOSEST_MONDAY, 4, 23),
            regions=only("nl"),
            is_public_holiday=False,
            categories=[REGIONAL],
        ),
        define(
            "Victoria Day",
            Computed(MONDAY_BEFORE, 5, 25),
            PostWeekendShift(),
            regional_names={"qc": "National Patriots' Day"},
            categories=[NATIONAL, REGIONAL],
        ),
        define(
            "National Indigenous Peoples Day",
            Fixed(6, 21),
            PostWeekendShift(),
            regions=only("nt", "yt"),
            categories=[REGIONAL],
        ),
        define(
            "Saint-Jean-Baptiste Day",
            Fixed(6, 24),
            PostWeekendShift(),
            regions=only("qc"),
            regional_names={"qc": "Fête Nationale"},
            description=(
                "Quebec's National Holiday - You may be entitled to paid leave. This depends "
                "on your collective agreement or employment contract."
            ),
            categories=[REGIONAL],
        ),
        define(
            "Canada Day",
            Fixed(7, 1),
            PostWeekendShift(),
            regional_names={"nl": "Memorial Day"},
            categories=[NATIONAL],
        ),
        define(
            "Nunavut Day",
            Fixed(7, 9),
            PostWeekendShift(),
            regions=only("nu"),
            categories=[REGIONAL],
        ),
        define(
            "Orangemen's Day",
            Computed(CLOSEST_MONDAY, 7, 12),
            regions=only("nl"),
            is_public_holiday=False,
            categories=[REGIONAL],
        ),
        define(
            "Civic Holiday",
            NthWeekday(8, MONDAY, 1),
            PostWeekendShift(),
            regions=only("bc", "nb", "nt", "nu", "sk"),
            regional_names={
                "bc": "British Columbia Day",
                "nb": "New Brunswick Day",
                "sk": "Saskatchewan Day",
            },
            categories=[NATIONAL, REGIONAL],
        ),
        define(
            "Discovery Day",
            NthWeekday(8, MONDAY, 3),
            regions=only("yt"),
            categories=[REGIONAL],
        ),
        define(
            "Gold Cup Parade Day",
            NthWeekday(8, FRIDAY, 3),
            regions=only("pe"),
            is_public_holiday=False,
            categories=[REGIONAL],
        ),
        define(
            "Labour Day",
            NthWeekday(9, MONDAY, 1),
            PostWeekendShift(),
            categories=[NATIONAL],
        ),
        define(
            "National Day for Truth and Reconciliation",
            Fixed(9, 30),
            PostWeekendShift(),
            regions=only("bc", "nt", "pe", "mb", "yt"),
            regional_names={"mb": "Orange Shirt Day"},
            description=(
                "The day is meant for reflection and education about the history and "
                "legacy of residential schools in Canada"
            ),
            categories=[NATIONAL, REGIONAL],
        ),
        define(
            "Thanksgiving Day",
            NthWeekday(10, MONDAY, 2),
            regions=all_except("nb", "ns", "pe"),
            description=_NS_RETAIL,
            categories=[NATIONAL],
        ),
        define(
            "Remembrance Day",
            Fixed(11, 11),
            PostWeekendShift(),
            regions=all_except("ns", "on", "qc"),
            regional_names={"nl": "Armistice Day"},
            description=(
                "Some employers in provinces where it's a statutory holiday might choose to "
                "give the following Monday off, but this isn't a universal practice. "
                "Ceremonies and moments of silence are typically observed at 11:00 AM local "
                "time on November 11, regardless of whether it's a work day or not"
            ),
            categories=[NATIONAL],
        ),
        define(
            "Christmas Day",
            Fixed(12, 25),
            PostWeekendShift(),
            categories=[NATIONAL, RELIGIOUS],
        ),
        define(
            "Boxing Day",
            Fixed(12, 26),
            RelativeTo("Christmas Day", DAY_AFTER_SKIPPING_WEEKEND),
            regions=only("on", "nl"),
            description=_NS_RETAIL,
            categories=[NATIONAL, REGIONAL],
        ),
    ]


def build() -> Country:
    return Country(CODE, NAME, definitions(), regions())
