"""
FARS Monthly Accident Summary (Functional Core)

Pure functions only. No I/O, no logging, no side effects.
Input is a sequence of per-year ``[MONTH, year]`` tables (``None`` for a
year that failed to load); output is a DataFrame.

Package Location: src/fars/analysis/summary.py

Counting:
    Rows are counted per ``(year, MONTH)`` pair by accumulating into a
    mapping-of-mappings ``{year: {month: n}}``.  The wide table is then
    materialized from that mapping, so the long-to-wide reshape never
    depends on a pandas pivot of whatever columns happen to exist.

Wide layout::

    MONTH   2013   2014
        1   2230   2168
        2   1952   <NA>
      ...

    - One row per month observed in *any* year, ascending.
    - One column per year, ascending, header is the year as text.
    - A (year, month) pair with no rows is ``<NA>`` (nullable ``Int64``),
      never zero.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pandas as pd

from .schema import MONTH

YEAR: str = 'year'
COUNT: str = 'n'

MonthlyCounts = Dict[int, Dict[int, int]]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def count_by_month(frames: Iterable[Optional[pd.DataFrame]]) -> MonthlyCounts:
    """
    Count rows per ``(year, MONTH)`` across all usable tables.

    ``None`` entries (years that failed to load) are skipped.  Rows with a
    missing ``MONTH`` are not counted.  A year that appears in several
    tables accumulates across all of them.

    Args:
        frames: Per-year tables with columns ``[MONTH, year]``.

    Returns:
        ``{year: {month: n}}`` with plain ``int`` keys and values.
    """
    counts: MonthlyCounts = {}

    for frame in frames:
        if frame is None or frame.empty:
            continue
        sizes = frame.groupby([YEAR, MONTH]).size()
        for (year, month), n in sizes.items():
            year_counts = counts.setdefault(int(year), {})
            year_counts[int(month)] = year_counts.get(int(month), 0) + int(n)

    return counts


def monthly_counts(counts: MonthlyCounts) -> pd.DataFrame:
    """
    Long form of *counts*: one row per observed ``(year, MONTH)`` pair.

    This is the grouped count table before the reshape, with the count
    in column ``n``.  ``summarize_years(..., long=True)`` and
    ``fars summarize --long`` return it in place of the wide table.

    Returns:
        DataFrame with columns ``[year, MONTH, n]`` sorted by year then
        month.  Empty (with those columns) when *counts* is empty.
    """
    rows = [
        (year, month, n)
        for year in sorted(counts)
        for month, n in sorted(counts[year].items())
    ]
    return pd.DataFrame(rows, columns=[YEAR, MONTH, COUNT]).astype('int64')


def pivot_counts(counts: MonthlyCounts) -> pd.DataFrame:
    """
    Materialize *counts* as the wide month-by-year table.

    Args:
        counts: ``{year: {month: n}}`` as built by :func:`count_by_month`.

    Returns:
        DataFrame with an ``int64`` ``MONTH`` column followed by one
        ``Int64`` column per year (header ``str(year)``).  With no counts
        at all, a table holding only an empty ``MONTH`` column.
    """
    years: List[int] = sorted(counts)
    months: List[int] = sorted({m for by_month in counts.values() for m in by_month})

    table = pd.DataFrame({MONTH: pd.Series(months, dtype='int64')})
    for year in years:
        by_month = counts[year]
        table[str(year)] = pd.array(
            [by_month.get(month) for month in months], dtype='Int64'
        )

    return table


def summarize(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Build the wide monthly summary from per-year ``[MONTH, year]`` tables.

    Failed years (``None``) are dropped before counting.  If nothing
    usable remains the result is an empty table, never an exception.

    Example::

        frames = [r.data for r in read_years([2013, 2014])]
        summarize(frames)
        #    MONTH  2013  2014
        # 0      1  2230  2168
        # ...
    """
    return pivot_counts(count_by_month(frames))
