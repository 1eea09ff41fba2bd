"""The command-line interface for this project"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer

from customweek.calculator import date_of, week_of
from customweek.config import OutputSettings, load_config
from customweek.errors import CustomWeekError, OutOfRange
from customweek.frames import week_calendar, weekly_from_file
from customweek.logging_setup import setup_logging
from customweek.specification import Weekday, WeekSpecification
from customweek.utils_time import parse_date

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Week numbers under configurable week rules")

PRESET_HELP = "Named week rule: iso, theater or sunday"
FIRST_DAY_HELP = "First day of the week (e.g. monday, wed)"
MIN_DAYS_HELP = "Minimum number of days of the year in week 1 (1-7)"


def _resolve_spec(
    preset: Optional[str],
    first_day: Optional[str],
    min_days: Optional[int],
) -> WeekSpecification:
    """Build the week rule from the options, falling back to the configured one."""
    try:
        if preset:
            return WeekSpecification.from_preset(preset)
        if first_day is None and min_days is None:
            return load_config().week.specification()
        base = WeekSpecification.iso()
        return WeekSpecification(
            Weekday.parse(first_day) if first_day else base.first_day,
            min_days if min_days is not None else base.min_days_in_first_week,
        )
    except CustomWeekError as e:
        raise typer.BadParameter(str(e))
    except FileNotFoundError as e:
        raise typer.BadParameter(f"{e}; pass --preset or --first-day/--min-days instead")


def _output_settings() -> OutputSettings:
    """Configured output defaults; the built-in ones when there is no config file."""
    try:
        return load_config().output
    except FileNotFoundError:
        logger.debug("No config file, using built-in output defaults")
        return OutputSettings()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    setup_logging(logging.DEBUG if verbose else logging.INFO)


@app.command("week")
def week_cmd(
    day: str = typer.Argument(..., help="Date as YYYY-MM-DD"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Week format (%Y %C %y %W)"),
    preset: Optional[str] = typer.Option(None, help=PRESET_HELP),
    first_day: Optional[str] = typer.Option(None, help=FIRST_DAY_HELP),
    min_days: Optional[int] = typer.Option(None, help=MIN_DAYS_HELP),
) -> None:
    """Print the week a date belongs to, followed by the week's first day."""
    spec = _resolve_spec(preset, first_day, min_days)
    try:
        parsed = parse_date(day)
    except ValueError:
        raise typer.BadParameter(f"Not a YYYY-MM-DD date: {day!r}", param_hint="DAY")
    try:
        week = week_of(parsed, spec)
    except OutOfRange as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    fmt = fmt or _output_settings().format
    logger.debug("%s under %s -> %s", parsed, spec, week)
    typer.echo(f"{week.format(fmt)}\t{week.week_start.isoformat()}")


@app.command("start")
def start_cmd(
    year: int = typer.Argument(..., help="Week-year"),
    week: int = typer.Argument(..., help="Week number"),
    preset: Optional[str] = typer.Option(None, help=PRESET_HELP),
    first_day: Optional[str] = typer.Option(None, help=FIRST_DAY_HELP),
    min_days: Optional[int] = typer.Option(None, help=MIN_DAYS_HELP),
) -> None:
    """Print the first day of a week."""
    spec = _resolve_spec(preset, first_day, min_days)
    try:
        start = date_of(year, week, spec)
    except OutOfRange as e:
        typer.secho(f"Week {week} does not exist in {year}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(start.isoformat())


@app.command("weeks")
def weeks_cmd(
    year: int = typer.Argument(..., help="First week-year to list"),
    end_year: Optional[int] = typer.Option(None, help="Last week-year to list (default: YEAR)"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Label format (%Y %C %y %W)"),
    preset: Optional[str] = typer.Option(None, help=PRESET_HELP),
    first_day: Optional[str] = typer.Option(None, help=FIRST_DAY_HELP),
    min_days: Optional[int] = typer.Option(None, help=MIN_DAYS_HELP),
) -> None:
    """List every week of one or more week-years."""
    spec = _resolve_spec(preset, first_day, min_days)
    fmt = fmt or _output_settings().format
    try:
        table = week_calendar(year, end_year, spec, fmt=fmt)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--end-year")
    typer.echo(table.to_string(index=False))


@app.command("aggregate")
def aggregate_cmd(
    src: str = typer.Argument(..., help="Daily table (CSV or Parquet)"),
    out: str = typer.Argument(..., help="Where to write the weekly table (CSV or Parquet)"),
    date_col: Optional[str] = typer.Option(None, help="Name of the date column"),
    agg: List[str] = typer.Option(
        ...,
        "--agg",
        help="Aggregation as column=function, e.g. rain_mm=sum. Repeat for several columns.",
    ),
    preset: Optional[str] = typer.Option(None, help=PRESET_HELP),
    first_day: Optional[str] = typer.Option(None, help=FIRST_DAY_HELP),
    min_days: Optional[int] = typer.Option(None, help=MIN_DAYS_HELP),
) -> None:
    """Aggregate a daily table into one row per week."""
    spec = _resolve_spec(preset, first_day, min_days)
    spec_map = {}
    for item in agg:
        column, sep, func = item.partition("=")
        if not sep or not column or not func:
            raise typer.BadParameter(f"Expected column=function, got {item!r}", param_hint="--agg")
        spec_map[column.strip()] = func.strip()

    date_col = date_col or _output_settings().date_col
    try:
        weekly = weekly_from_file(src, out, spec, spec_map, date_col=date_col)
    except FileNotFoundError as e:
        raise typer.BadParameter(str(e), param_hint="SRC")
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(f"Wrote {out} ({len(weekly)} rows)")


def main() -> None:
    """Entry point for the ``customweek`` console script."""
    app()


if __name__ == "__main__":
    main()
