"""
FARS Summary Engine (Imperative Shell)

Loads the requested years through the reader and delegates counting and
reshaping to the Functional Core (analysis/summary.py).  Optionally
writes the resulting table to CSV.

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

import pandas as pd

from .reader import PathLike, read_years
from ..analysis.summary import count_by_month, monthly_counts, pivot_counts

log = logging.getLogger(__name__)


def summarize_years(
    years: Union[Any, Sequence[Any]],
    data_dir: Optional[PathLike] = None,
    output_dir: Optional[PathLike] = None,
    long: bool = False,
) -> pd.DataFrame:
    """
    Number of accidents per month for each requested year.

    Years whose file is missing or unreadable are warned about and left
    out; if every year fails the result is an empty table.

    Args:
        years: One year or a sequence of years.
        data_dir: Directory holding ``accident_<year>.csv.bz2`` files.
        output_dir: When provided, also write the table to
            ``fars_summary_<first>-<last>.csv`` in this directory.
        long: Return the long table ``[year, MONTH, n]`` (one row per
            observed year/month pair) instead of the wide one.

    Returns:
        DataFrame with ``MONTH`` followed by one column per loaded year
        (header is the year as text), or the long table when *long*.

    Example::

        summarize_years([2013, 2014, 2015], data_dir="data")
        #     MONTH  2013  2014  2015
        # 0       1  2230  2168  2368
        # ...
    """
    results = read_years(years, data_dir=data_dir)
    counts = count_by_month(r.data for r in results)
    table = monthly_counts(counts) if long else pivot_counts(counts)

    loaded = sum(1 for r in results if r.ok)
    log.info(
        "Summarized %d of %d requested year(s)", loaded, len(results),
        extra={"loaded": loaded, "requested": len(results)},
    )

    if output_dir is not None:
        _write_csv(table, output_dir, [r.year for r in results], long)

    return table


def _write_csv(
    table: pd.DataFrame,
    output_dir: PathLike,
    years: List[Any],
    long: bool = False,
) -> Path:
    """Write *table* to ``output_dir`` and return the file path."""
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if years:
        tag = f"{years[0]}-{years[-1]}" if len(years) > 1 else f"{years[0]}"
    else:
        tag = "empty"
    suffix = "_long" if long else ""
    out_path = out_dir / f"fars_summary_{tag}{suffix}.csv"

    table.to_csv(out_path, index=False)
    log.info("Wrote summary to %s", out_path, extra={"path": str(out_path)})
    return out_path
