"""Typer CLI for statdays."""

from __future__ import annotations

import datetime
import json
import logging
import pathlib
import sys

import typer

from statdays.countries import COUNTRIES, get_country
from statdays.country import Country
from statdays.errors import HolidayError
from statdays.regions import Region, RegionalHoliday, normalize_region
from statdays.resolver import ResolvedHoliday

app = typer.Typer(
    name="statdays",
    help="Statutory holiday calculator — list national and regional holidays for any year "
    "from 1900 to 2200.",
    add_completion=False,
)


def _current_year() -> int:
    return datetime.date.today().year


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


def _load_country(code: str) -> Country:
    try:
        return get_country(code)
    except HolidayError as exc:
        raise _fail(exc) from None


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _serialize_holiday(h: ResolvedHoliday | RegionalHoliday) -> dict[str, object]:
    data: dict[str, object] = {
        "name": h.name,
        "date": h.date.isoformat(),
        "observance_date": h.observance_date.isoformat(),
        "is_public_holiday": h.is_public_holiday,
        "categories": sorted(c.value for c in h.categories),
        "description": h.description,
    }
    if isinstance(h, RegionalHoliday):
        data["region"] = h.region
    else:
        data["regional_names"] = dict(sorted(h.regional_names.items()))
    return data


def _serialize_region(r: Region) -> dict[str, object]:
    return {
        "name": r.name,
        "type": r.region_type.value,
        "code": r.code,
        "reference_url": r.reference_url,
    }


def _emit_json(document: object, output: str | None) -> None:
    if output is None:
        json.dump(document, sys.stdout, indent=2, ensure_ascii=False)
        typer.echo()
        return
    path = pathlib.Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    typer.echo(f"Wrote {path}")


def _format_line(h: ResolvedHoliday | RegionalHoliday) -> str:
    line = f"    {h.date.strftime('%a, %b %d'):>12}  {h.name}"
    if h.observance_date != h.date:
        line += f"  (observed {h.observance_date.strftime('%a, %b %d')})"
    return line


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def holidays(
    country: str = typer.Option(
        "ca",
        "--country",
        "-c",
        help=f"Country preset ({', '.join(sorted(COUNTRIES))}).",
    ),
    year: int = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to list holidays for. Defaults to the current year.",
    ),
    region: str | None = typer.Option(
        None,
        "--region",
        "-r",
        help="Province, territory or state code. Omit for the national list.",
    ),
    sort: bool = typer.Option(
        False,
        "--sort",
        help="Order holidays by date instead of table order.",
    ),
    public_only: bool = typer.Option(
        False,
        "--public-only",
        help="Only list recognised public holidays.",
    ),
    output_json: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON.",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write JSON results to this file (implies --json).",
    ),
) -> None:
    """List holidays for a country, or for one of its regions."""
    preset = _load_country(country)
    resolved_year = year if year is not None else _current_year()

    try:
        if region is None:
            results: list[ResolvedHoliday] | list[RegionalHoliday] = preset.holidays(
                resolved_year, sort=sort
            )
        else:
            region = normalize_region(region, preset.region_codes())
            results = preset.holidays_by_region(region, resolved_year, sort=sort)
    except HolidayError as exc:
        raise _fail(exc) from None

    if public_only:
        results = [h for h in results if h.is_public_holiday]  # type: ignore[assignment]

    if output_json or output is not None:
        document = {
            "country": preset.code,
            "region": region,
            "year": resolved_year,
            "holidays": [_serialize_holiday(h) for h in results],
        }
        _emit_json(document, output)
        return

    scope = preset.name if region is None else f"{preset.name} ({region})"
    typer.echo(f"  {scope} — {resolved_year}")
    typer.echo()
    for h in results:
        typer.echo(_format_line(h))


@app.command()
def holiday(
    name: str = typer.Argument(..., help="Canonical holiday name, e.g. 'Canada Day'."),
    country: str = typer.Option("ca", "--country", "-c", help="Country preset."),
    year: int = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to resolve. Defaults to the current year.",
    ),
    output_json: bool = typer.Option(False, "--json", help="Output result as JSON."),
) -> None:
    """Show one holiday by name."""
    preset = _load_country(country)
    resolved_year = year if year is not None else _current_year()

    try:
        h = preset.holiday(name, resolved_year)
    except HolidayError as exc:
        raise _fail(exc) from None

    if output_json:
        _emit_json(_serialize_holiday(h), None)
        return

    typer.echo(_format_line(h))
    if h.description:
        typer.echo(f"    {h.description}")


@app.command()
def regions(
    country: str = typer.Option("ca", "--country", "-c", help="Country preset."),
    output_json: bool = typer.Option(False, "--json", help="Output regions as JSON."),
) -> None:
    """List the provinces, territories or states of a country."""
    preset = _load_country(country)

    if output_json:
        _emit_json([_serialize_region(r) for r in preset.regions()], None)
        return

    typer.echo(f"  {preset.name}")
    typer.echo()
    for r in preset.regions():
        typer.echo(f"    {r.code:<4} {r.name} ({r.region_type.value})")


@app.command()
def countries() -> None:
    """List supported country presets."""
    for code, name in sorted(COUNTRIES.items()):
        typer.echo(f"    {code:<4} {name}")


def main() -> None:
    """Entry point for the CLI."""
    app()
