from __future__ import annotations

import datetime

import pytest

from statdays import (
    Country,
    DefinitionError,
    InvalidYearError,
    UnknownCountryError,
    UnknownHolidayError,
    UnknownRegionError,
    get_country,
    get_holidays,
    supported_countries,
)
from statdays.countries import canada
from statdays.dates import MONDAY
from statdays.regions import Region, RegionType
from statdays.rules import (
    CALCULATORS,
    CLOSEST_MONDAY,
    DAY_AFTER_SKIPPING_WEEKEND,
    PASCHAL_SUNDAY,
    TRANSFORMS,
    Calculator,
    Category,
    Computed,
    Fixed,
    NthWeekday,
    RelativeTo,
    Transform,
    define,
    get_calculator,
    get_transform,
    only,
)

CA = get_country("ca")


def _observances(name: str, years: range) -> dict[int, datetime.date]:
    return {year: CA.holiday(name, year).observance_date for year in years}


class TestPresets:
    def test_supported_countries(self) -> None:
        assert supported_countries() == [("ca", "Canada")]

    def test_get_country_is_shared(self) -> None:
        assert get_country("ca") is get_country("CA")

    def test_unknown_country(self) -> None:
        with pytest.raises(UnknownCountryError, match="Supported: ca"):
            get_country("xx")

    def test_get_holidays_national(self) -> None:
        assert len(get_holidays("ca", 2025)) == len(CA.definitions)

    def test_get_holidays_region(self) -> None:
        assert {h.region for h in get_holidays("ca", 2025, "on")} == {"on"}


class TestRegistry:
    def test_regions(self) -> None:
        regions = CA.regions()
        assert len(regions) == 13
        assert regions[0] == Region(
            "Alberta", RegionType.PROVINCE, "ab", "https://www.alberta.ca/alberta-general-holidays"
        )

    def test_region_codes(self) -> None:
        assert CA.region_codes() == {r.code for r in CA.regions()}
        assert len(CA.region_codes()) == 13

    def test_territories(self) -> None:
        territories = {r.code for r in CA.regions() if r.region_type is RegionType.TERRITORY}
        assert territories == {"nt", "nu", "yt"}

    def test_holiday_names_in_table_order(self) -> None:
        names = CA.holiday_names()
        assert names[0] == "New Year's Day"
        assert names[-1] == "Boxing Day"
        assert len(names) == len(set(names)) == 22


class TestNationalHolidays:
    def test_count(self) -> None:
        assert len(CA.holidays(2025)) == 22

    def test_national_category_count(self) -> None:
        national = [h for h in CA.holidays(2025) if Category.NATIONAL in h.categories]
        assert len(national) == 12

    def test_deterministic(self) -> None:
        assert CA.holidays(2025) == CA.holidays(2025)

    def test_sorted(self) -> None:
        resolved = CA.holidays(2025, sort=True)
        assert [h.date for h in resolved] == sorted(h.date for h in resolved)

    @pytest.mark.parametrize("year", [1899, 2201, 0, "2022"])
    def test_invalid_year(self, year: object) -> None:
        with pytest.raises(InvalidYearError):
            CA.holidays(year)  # type: ignore[arg-type]

    @pytest.mark.parametrize("year", [1900, 2200])
    def test_boundary_years(self, year: int) -> None:
        assert len(CA.holidays(year)) == 22

    def test_every_year_resolves(self) -> None:
        for year in range(1900, 2201):
            CA.holidays(year)

    def test_public_holidays_excludes_observances(self) -> None:
        names = {h.name for h in CA.public_holidays(2025)}
        assert "Canada Day" in names
        assert "Easter Sunday" not in names
        assert "Gold Cup Parade Day" not in names

    def test_observance_dates(self) -> None:
        observed = CA.observance_dates(2023, "on")
        assert datetime.date(2023, 7, 3) in observed
        assert datetime.date(2023, 7, 1) not in observed


class TestHolidayLookup:
    def test_canada_day(self) -> None:
        h = CA.holiday("Canada Day", 2025)
        assert h.name == "Canada Day"
        assert (h.date.month, h.date.day) == (7, 1)

    def test_unknown_holiday(self) -> None:
        with pytest.raises(UnknownHolidayError, match="Festivus"):
            CA.holiday("Festivus", 2025)

    def test_invalid_year_checked_first(self) -> None:
        with pytest.raises(InvalidYearError):
            CA.holiday("Festivus", 1800)

    def test_new_years_day(self) -> None:
        assert _observances("New Year's Day", range(2022, 2029)) == {
            2022: datetime.date(2022, 1, 3),
            2023: datetime.date(2023, 1, 2),
            2024: datetime.date(2024, 1, 1),
            2025: datetime.date(2025, 1, 1),
            2026: datetime.date(2026, 1, 1),
            2027: datetime.date(2027, 1, 1),
            2028: datetime.date(2028, 1, 3),
        }

    def test_good_friday(self) -> None:
        assert _observances("Good Friday", range(2022, 2027)) == {
            2022: datetime.date(2022, 4, 15),
            2023: datetime.date(2023, 4, 7),
            2024: datetime.date(2024, 3, 29),
            2025: datetime.date(2025, 4, 18),
            2026: datetime.date(2026, 4, 3),
        }

    def test_easter_monday(self) -> None:
        assert _observances("Easter Monday", range(2022, 2027)) == {
            2022: datetime.date(2022, 4, 18),
            2023: datetime.date(2023, 4, 10),
            2024: datetime.date(2024, 4, 1),
            2025: datetime.date(2025, 4, 21),
            2026: datetime.date(2026, 4, 6),
        }

    def test_victoria_day(self) -> None:
        assert _observances("Victoria Day", range(2022, 2033)) == {
            2022: datetime.date(2022, 5, 23),
            2023: datetime.date(2023, 5, 22),
            2024: datetime.date(2024, 5, 20),
            2025: datetime.date(2025, 5, 19),
            2026: datetime.date(2026, 5, 18),
            2027: datetime.date(2027, 5, 24),
            2028: datetime.date(2028, 5, 22),
            2029: datetime.date(2029, 5, 21),
            2030: datetime.date(2030, 5, 20),
            2031: datetime.date(2031, 5, 19),
            2032: datetime.date(2032, 5, 24),
        }

    def test_canada_day_observance(self) -> None:
        assert _observances("Canada Day", range(2022, 2030)) == {
            2022: datetime.date(2022, 7, 1),
            2023: datetime.date(2023, 7, 3),
            2024: datetime.date(2024, 7, 1),
            2025: datetime.date(2025, 7, 1),
            2026: datetime.date(2026, 7, 1),
            2027: datetime.date(2027, 7, 1),
            2028: datetime.date(2028, 7, 3),
            2029: datetime.date(2029, 7, 2),
        }

    def test_orangemens_day_closest_monday(self) -> None:
        assert CA.holiday("Orangemen's Day", 2025).date == datetime.date(2025, 7, 14)
        assert CA.holiday("Orangemen's Day", 2023).date == datetime.date(2023, 7, 10)

    def test_thanksgiving(self) -> None:
        assert _observances("Thanksgiving Day", range(2022, 2026)) == {
            2022: datetime.date(2022, 10, 10),
            2023: datetime.date(2023, 10, 9),
            2024: datetime.date(2024, 10, 14),
            2025: datetime.date(2025, 10, 13),
        }

    def test_christmas_day(self) -> None:
        assert _observances("Christmas Day", range(2022, 2028)) == {
            2022: datetime.date(2022, 12, 26),
            2023: datetime.date(2023, 12, 25),
            2024: datetime.date(2024, 12, 25),
            2025: datetime.date(2025, 12, 25),
            2026: datetime.date(2026, 12, 25),
            2027: datetime.date(2027, 12, 27),
        }

    def test_boxing_day(self) -> None:
        assert _observances("Boxing Day", range(2020, 2033)) == {
            2020: datetime.date(2020, 12, 28),
            2021: datetime.date(2021, 12, 28),
            2022: datetime.date(2022, 12, 27),
            2023: datetime.date(2023, 12, 26),
            2024: datetime.date(2024, 12, 26),
            2025: datetime.date(2025, 12, 26),
            2026: datetime.date(2026, 12, 28),
            2027: datetime.date(2027, 12, 28),
            2028: datetime.date(2028, 12, 26),
            2029: datetime.date(2029, 12, 26),
            2030: datetime.date(2030, 12, 26),
            2031: datetime.date(2031, 12, 26),
            2032: datetime.date(2032, 12, 28),
        }


class TestRegionalHolidays:
    @pytest.mark.parametrize(
        ("region", "count"),
        [("on", 9), ("qc", 8), ("ns", 7), ("nl", 12)],
    )
    def test_counts(self, region: str, count: int) -> None:
        assert len(CA.holidays_by_region(region, 2025)) == count

    def test_all_regions_holiday_everywhere(self) -> None:
        for code in CA.region_codes():
            names = [h.name for h in CA.holidays_by_region(code, 2025)]
            assert any(n.endswith("Canada Day") or n.endswith("(Canada Day)") for n in names)
            assert "Labour Day" in names

    def test_thanksgiving_exclusions(self) -> None:
        for code in CA.region_codes():
            names = [h.name for h in CA.holidays_by_region(code, 2025)]
            assert ("Thanksgiving Day" in names) == (code not in {"nb", "ns", "pe"})

    def test_regional_names(self) -> None:
        mb = [h.name for h in CA.holidays_by_region("mb", 2025)]
        assert "Louis Riel Day (Family Day)" in mb
        assert "Orange Shirt Day (National Day for Truth and Reconciliation)" in mb

        qc = [h.name for h in CA.holidays_by_region("qc", 2025)]
        assert "National Patriots' Day (Victoria Day)" in qc
        assert "Fête Nationale (Saint-Jean-Baptiste Day)" in qc

        nl = [h.name for h in CA.holidays_by_region("nl", 2025)]
        assert "Memorial Day (Canada Day)" in nl

        on = [h.name for h in CA.holidays_by_region("on", 2025)]
        assert "Family Day" in on
        assert "Canada Day" in on

    def test_easter_not_listed_regionally(self) -> None:
        for code in CA.region_codes():
            names = [h.name for h in CA.holidays_by_region(code, 2025)]
            assert "Easter Sunday" not in names
            assert "Easter Monday" not in names

    def test_unknown_region(self) -> None:
        with pytest.raises(UnknownRegionError):
            CA.holidays_by_region("zz", 2025)

    def test_invalid_year(self) -> None:
        with pytest.raises(InvalidYearError):
            CA.holidays_by_region("on", 2201)

    @pytest.mark.parametrize("region", [["on"], None, 7])
    def test_non_string_region(self, region: object) -> None:
        with pytest.raises(UnknownRegionError, match="expected a region code string"):
            CA.holidays_by_region(region, 2025)  # type: ignore[arg-type]

    def test_public_holidays_for_region(self) -> None:
        names = [h.name for h in CA.public_holidays(2025, "nl")]
        assert "St. Patrick's Day" not in names
        assert "Armistice Day (Remembrance Day)" in names


def _regions() -> list[Region]:
    return [Region("One", RegionType.PROVINCE, "aa"), Region("Two", RegionType.TERRITORY, "bb")]


class TestTableValidation:
    def test_canadian_table_is_valid(self) -> None:
        assert isinstance(canada.build(), Country)

    def test_duplicate_names(self) -> None:
        table = [define("X", Fixed(1, 1)), define("X", Fixed(1, 2))]
        with pytest.raises(DefinitionError, match="Duplicate"):
            Country("zz", "Test", table, _regions())

    def test_bad_fixed_date(self) -> None:
        with pytest.raises(DefinitionError, match="invalid month/day"):
            Country("zz", "Test", [define("X", Fixed(2, 30))], _regions())

    def test_leap_day_allowed(self) -> None:
        Country("zz", "Test", [define("X", Fixed(2, 29))], _regions())

    def test_occurrence_out_of_range(self) -> None:
        with pytest.raises(DefinitionError, match="occurrence"):
            Country("zz", "Test", [define("X", NthWeekday(2, MONDAY, 5))], _regions())

    def test_weekday_out_of_range(self) -> None:
        with pytest.raises(DefinitionError, match="weekday"):
            Country("zz", "Test", [define("X", NthWeekday(2, 0, 1))], _regions())

    def test_computed_missing_month_day(self) -> None:
        with pytest.raises(DefinitionError, match="needs a month and day"):
            Country("zz", "Test", [define("X", Computed(CLOSEST_MONDAY))], _regions())

    def test_computed_year_form_with_month_day(self) -> None:
        with pytest.raises(DefinitionError, match="takes only the year"):
            Country("zz", "Test", [define("X", Computed(PASCHAL_SUNDAY, 4, 1))], _regions())

    def test_dangling_relative(self) -> None:
        table = [define("X", Fixed(1, 2), RelativeTo("Y", DAY_AFTER_SKIPPING_WEEKEND))]
        with pytest.raises(DefinitionError, match="unknown holiday 'Y'"):
            Country("zz", "Test", table, _regions())

    def test_chained_relative(self) -> None:
        table = [
            define("A", Fixed(1, 1)),
            define("B", Fixed(1, 2), RelativeTo("A", DAY_AFTER_SKIPPING_WEEKEND)),
            define("C", Fixed(1, 3), RelativeTo("B", DAY_AFTER_SKIPPING_WEEKEND)),
        ]
        with pytest.raises(DefinitionError, match="itself relative"):
            Country("zz", "Test", table, _regions())

    def test_unknown_region_in_table(self) -> None:
        table = [define("X", Fixed(1, 1), regions=only("aa", "cc"))]
        with pytest.raises(DefinitionError, match="cc"):
            Country("zz", "Test", table, _regions())

    def test_unknown_region_in_names(self) -> None:
        table = [define("X", Fixed(1, 1), regional_names={"dd": "Local"})]
        with pytest.raises(DefinitionError, match="dd"):
            Country("zz", "Test", table, _regions())

    def test_definitions_are_read_only(self) -> None:
        family = next(d for d in CA.definitions if d.name == "Family Day")
        with pytest.raises(TypeError):
            family.regional_names["on"] = "Other"  # type: ignore[index]

    def test_unregistered_calculator(self) -> None:
        rogue = Calculator("third_monday", CLOSEST_MONDAY.fn, takes_date=True)
        table = [define("X", Computed(rogue, 1, 15))]
        with pytest.raises(DefinitionError, match="Unknown calculator 'third_monday'"):
            Country("zz", "Test", table, _regions())

    def test_calculator_shadowing_a_registered_name(self) -> None:
        impostor = Calculator("closest_monday", PASCHAL_SUNDAY.fn, takes_date=True)
        table = [define("X", Computed(impostor, 1, 15))]
        with pytest.raises(DefinitionError, match="not the registered one"):
            Country("zz", "Test", table, _regions())

    def test_unregistered_transform(self) -> None:
        rogue = Transform("two_days_later", DAY_AFTER_SKIPPING_WEEKEND.fn)
        table = [define("A", Fixed(1, 1)), define("B", Fixed(1, 2), RelativeTo("A", rogue))]
        with pytest.raises(DefinitionError, match="Unknown transform 'two_days_later'"):
            Country("zz", "Test", table, _regions())


class TestRegistries:
    def test_get_calculator(self) -> None:
        assert get_calculator("closest_monday") is CLOSEST_MONDAY
        assert set(CALCULATORS) == {
            "paschal_sunday",
            "good_friday",
            "easter_monday",
            "closest_monday",
            "monday_before",
        }

    def test_unknown_calculator_lists_supported(self) -> None:
        with pytest.raises(DefinitionError, match="Supported: closest_monday, easter_monday"):
            get_calculator("ascension")

    def test_get_transform(self) -> None:
        assert get_transform("day_after_skipping_weekend") is DAY_AFTER_SKIPPING_WEEKEND
        assert list(TRANSFORMS) == ["day_after_skipping_weekend"]

    def test_unknown_transform_lists_supported(self) -> None:
        with pytest.raises(DefinitionError, match="Supported: day_after_skipping_weekend"):
            get_transform("day_before")
