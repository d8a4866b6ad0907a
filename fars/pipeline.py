"""Core pipeline logic: monthly accident counts across census years.

This module loads one accident file per requested year and aggregates the
rows into a month-by-year count table.

The primary entry point is :func:`fars_summarize_years`.  Loading is done by
:func:`fars_read_years`, which never aborts on a bad year: each year yields a
:class:`YearResult` that either carries the year's (MONTH, year) projection
or the reason it could not be read.  Counting and reshaping are split so the
intermediate ``(year, month) -> count`` mapping can be inspected on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import logging
import pandas as pd

from .config import MONTH_COL, YEAR_COL
from .reader import ensure_columns, fars_read, resolve_path, validate_accidents

# Module‑level logger
logger = logging.getLogger(__name__)

# Errors that mark a single year as unusable without aborting the others.
YEAR_LOAD_ERRORS: Tuple[type, ...] = (OSError, KeyError, ValueError)


# ---------------------------------------------------------------------------
# Per-year loading
# ---------------------------------------------------------------------------


def _empty_year_table() -> pd.DataFrame:
    return pd.DataFrame(
        {
            MONTH_COL: pd.Series(dtype="Int64"),
            YEAR_COL: pd.Series(dtype="int64"),
        }
    )


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of loading one requested year.

    ``table`` always has exactly the columns ``MONTH`` and ``year``; it is
    empty when the year failed, in which case ``error`` says why.  Instances
    compare by identity.
    """

    year: int
    table: pd.DataFrame
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_year(year: int | str, data_dir: str | Path | None = None) -> YearResult:
    """Load one year's accidents projected to ``MONTH`` and ``year``.

    Parameters
    ----------
    year : int or str
        Census year.  Coercion errors propagate to the caller.
    data_dir : str or Path, optional
        Directory holding the accident files; the working directory when
        ``None``.

    Returns
    -------
    YearResult
        A successful result, or a failed one with an empty placeholder table
        if the file is missing, unreadable or lacks a ``MONTH`` column.
    """
    year_int = int(year)
    try:
        raw = fars_read(resolve_path(year_int, data_dir))
        ensure_columns(raw, [MONTH_COL])
        months = validate_accidents(raw[[MONTH_COL]], [MONTH_COL])
    except YEAR_LOAD_ERRORS as exc:
        logger.warning("invalid year: %s", year_int)
        logger.debug("Year %s failed to load: %s", year_int, exc)
        return YearResult(year=year_int, table=_empty_year_table(), error=str(exc))

    table = months.assign(**{YEAR_COL: year_int}).reset_index(drop=True)
    return YearResult(year=year_int, table=table)


def fars_read_years(
    years: Iterable[int | str], data_dir: str | Path | None = None
) -> List[YearResult]:
    """Load each requested year independently, preserving input order.

    Duplicated years are loaded (and counted) once per occurrence.  A year
    that cannot be read produces a failed :class:`YearResult` and a logged
    warning; the remaining years are still processed.
    """
    return [load_year(year, data_dir) for year in years]


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def count_by_year_month(results: Iterable[YearResult]) -> Dict[Tuple[int, int], int]:
    """Count accidents per ``(year, month)`` over the successful results.

    Failed results contribute no rows.  Rows with a missing ``MONTH`` are
    dropped.

    Returns
    -------
    Dict[Tuple[int, int], int]
        Sparse mapping; pairs without any rows are absent.
    """
    tables = [result.table for result in results if result.ok]
    if not tables:
        return {}

    combined = pd.concat(tables, ignore_index=True).dropna(subset=[MONTH_COL])
    if combined.empty:
        return {}

    sizes = combined.groupby([YEAR_COL, MONTH_COL]).size()
    return {(int(year), int(month)): int(n) for (year, month), n in sizes.items()}


def materialize_summary(counts: Dict[Tuple[int, int], int]) -> pd.DataFrame:
    """Reshape a ``(year, month) -> count`` mapping into a wide table.

    Parameters
    ----------
    counts : Dict[Tuple[int, int], int]
        Output of :func:`count_by_year_month`.

    Returns
    -------
    pd.DataFrame
        One row per month present in ``counts`` (ascending) with a ``MONTH``
        column followed by one ``Int64`` column per year (ascending, labelled
        by the int year).  Year/month pairs without rows are ``<NA>``; they
        are never filled with zero.  An empty mapping gives a frame with only
        the ``MONTH`` header and no rows.
    """
    if not counts:
        return pd.DataFrame({MONTH_COL: pd.Series(dtype="Int64")})

    years = sorted({year for year, _ in counts})
    months = sorted({month for _, month in counts})

    table = pd.DataFrame({MONTH_COL: pd.array(months, dtype="Int64")})
    for year in years:
        table[year] = pd.array(
            [counts.get((year, month), pd.NA) for month in months], dtype="Int64"
        )
    return table


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


def fars_summarize_years(
    years: Iterable[int | str], data_dir: str | Path | None = None
) -> pd.DataFrame:
    """Summarize monthly accident counts for the requested years.

    Parameters
    ----------
    years : iterable of int or str
        Census years to include.  Years whose file cannot be read are
        skipped with a warning.
    data_dir : str or Path, optional
        Directory holding the accident files; the working directory when
        ``None``.

    Returns
    -------
    pd.DataFrame
        The table described in :func:`materialize_summary`.
    """
    results = fars_read_years(years, data_dir)

    failed = [result.year for result in results if not result.ok]
    if failed:
        logger.warning(
            "Skipped %d of %d year(s) with no readable data: %s",
            len(failed),
            len(results),
            failed,
        )

    summary = materialize_summary(count_by_year_month(results))
    logger.info(
        "Summarized %d month row(s) across %d year column(s)",
        len(summary),
        summary.shape[1] - 1,
    )
    return summary
