# src/customweek/frames.py
"""Week columns and weekly aggregation for pandas tables."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from .calculator import week_from
from .specification import WeekSpecification

logger = logging.getLogger(__name__)


def _week_start(days: pd.Series, spec: WeekSpecification) -> pd.Series:
    offset = (days.dt.weekday - spec.first_day.num_days_from_monday) % 7
    return days - pd.to_timedelta(offset, unit="D")


def add_week_columns(
    df: pd.DataFrame,
    spec: WeekSpecification,
    date_col: str = "date",
    prefix: str = "week",
) -> pd.DataFrame:
    """Return a copy of ``df`` with ``<prefix>_year``, ``<prefix>_number`` and ``<prefix>_start``.

    Missing or unparseable dates give ``<NA>`` / ``NaT``. Values match
    :func:`customweek.calculator.week_of` row by row.
    """
    if date_col not in df.columns:
        raise ValueError(f"Missing date column '{date_col}'")

    out = df.copy()
    days = pd.to_datetime(out[date_col], errors="coerce").dt.normalize()
    valid = days.notna()

    year = pd.Series(pd.NA, index=out.index, dtype="Int64")
    number = pd.Series(pd.NA, index=out.index, dtype="Int64")
    start = pd.Series(pd.NaT, index=out.index, dtype="datetime64[ns]")

    if valid.any():
        d = days[valid]
        week_start = _week_start(d, spec)
        anchor = week_start + pd.Timedelta(days=7 - spec.min_days_in_first_week)
        week_year = anchor.dt.year
        # week 1 always holds January <min_days>
        pivot = pd.to_datetime(
            pd.DataFrame({"year": week_year, "month": 1, "day": spec.min_days_in_first_week})
        )
        first = _week_start(pivot, spec)

        year[valid] = week_year.astype("int64").to_numpy()
        number[valid] = ((week_start - first).dt.days // 7 + 1).astype("int64").to_numpy()
        start[valid] = week_start.to_numpy()

    out[f"{prefix}_year"] = year
    out[f"{prefix}_number"] = number
    out[f"{prefix}_start"] = start
    return out


def weekly_aggregate(
    daily: pd.DataFrame,
    spec: WeekSpecification,
    agg: Dict[str, str],
    date_col: str = "date",
) -> pd.DataFrame:
    """Aggregate daily rows into one row per (week_year, week_number).

    ``agg`` maps a column to a pandas reduction name (``"sum"``, ``"mean"``...).
    Columns named in ``agg`` but absent from ``daily`` are ignored; a
    ``ValueError`` is raised when none of them is present.
    """
    cols = [c for c in agg if c in daily.columns]
    if not cols:
        raise ValueError(
            f"None of the aggregation columns ({', '.join(agg) or 'none given'}) are present"
        )
    missing = sorted(set(agg) - set(cols))
    if missing:
        logger.warning("Skipping missing columns: %s", ", ".join(missing))

    keyed = add_week_columns(daily, spec, date_col=date_col).dropna(subset=["week_year"])
    weekly = (
        keyed[["week_year", "week_number", "week_start"] + cols]
        .groupby(["week_year", "week_number", "week_start"], as_index=False)
        .agg({c: agg[c] for c in cols})
        .sort_values(["week_year", "week_number"])
        .reset_index(drop=True)
    )
    logger.info("Aggregated %d daily rows into %d weeks", len(daily), len(weekly))
    return weekly


def week_calendar(
    start_year: int,
    end_year: Optional[int],
    spec: WeekSpecification,
    fmt: str = "%Y-W%W",
) -> pd.DataFrame:
    """One row per week of every week-year from ``start_year`` to ``end_year`` (inclusive)."""
    end_year = start_year if end_year is None else end_year
    if end_year < start_year:
        raise ValueError(f"end_year {end_year} is before start_year {start_year}")

    rows = []
    for year in range(start_year, end_year + 1):
        week = week_from(year, 1, spec)
        while week.week_year == year:
            rows.append(
                {
                    "week_year": week.week_year,
                    "week_number": week.week_number,
                    "week_start": week.week_start,
                    "week_end": week.week_end,
                    "label": week.format(fmt),
                }
            )
            week = week.succ()
    return pd.DataFrame(rows, columns=["week_year", "week_number", "week_start", "week_end", "label"])


def _read_table(path: Path) -> pd.DataFrame:
    if path.suffix == ".parquet":
        return pd.read_parquet(path)
    return pd.read_csv(path)


def _write_table(df: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)


def weekly_from_file(
    src: str,
    out: str,
    spec: WeekSpecification,
    agg: Dict[str, str],
    date_col: str = "date",
) -> pd.DataFrame:
    """Read a daily CSV/Parquet table, aggregate it by week and write the result."""
    src_path, out_path = Path(src), Path(out)
    if not src_path.exists():
        raise FileNotFoundError(f"No such input table: {src_path}")

    daily = _read_table(src_path)
    weekly = weekly_aggregate(daily, spec, agg, date_col=date_col)
    _write_table(weekly, out_path)
    logger.info("Wrote %s (%d rows)", out_path, len(weekly))
    return weekly
