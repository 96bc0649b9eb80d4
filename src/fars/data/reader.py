"""
FARS Data Reader (Imperative Shell)

Resolves yearly census file names and loads them into DataFrames.

Package Location: src/fars/data/reader.py

Files are named ``accident_<year>.csv.bz2`` and are looked up in
*data_dir* (the current working directory when ``None``).  Compression
is inferred from the extension, so plain ``.csv`` paths passed straight
to :func:`read_accidents` also work.

Failure isolation:
    :func:`read_accidents` lets every failure propagate
    (``FileNotFoundError``, ``AccidentSchemaError``, pandas parse errors).
    :func:`read_years` catches them per year and records each one in a
    :class:`YearResult`, so one bad year never aborts a batch.  The
    failures are logged in a single reporting pass once the batch has
    been collected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

import pandas as pd

from ..analysis.schema import MONTH, REQUIRED_COLUMNS, coerce_int, validate_accidents
from ..analysis.summary import YEAR

log = logging.getLogger(__name__)

FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

PathLike = Union[str, Path]


@dataclass
class YearResult:
    """Outcome of loading one requested year.

    Exactly one of ``data`` / ``error`` is set.

    Attributes:
        year:  The year as requested (before coercion).
        data:  ``[MONTH, year]`` table on success, else ``None``.
        error: Failure reason on failure, else ``None``.
    """

    year: Any
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Return the census file name for *year*.

    The year is coerced to ``int`` first, so ``2013``, ``"2013"`` and
    ``"2013.0"`` all give ``'accident_2013.csv.bz2'``.  No range check is
    made; a nonsense year yields a name that simply won't exist.

    Raises:
        ValueError: If *year* is not numeric.
    """
    return FILENAME_TEMPLATE.format(year=coerce_int(year))


def resolve_path(year: Any, data_dir: Optional[PathLike] = None) -> Path:
    """Full path of the census file for *year* inside *data_dir*."""
    filename = make_filename(year)
    return Path(data_dir) / filename if data_dir is not None else Path(filename)


def read_accidents(
    path: PathLike,
    required: Iterable[str] = REQUIRED_COLUMNS,
) -> pd.DataFrame:
    """
    Load one accident file into a DataFrame.

    Columns keep their stored names (case included) and no rows are
    dropped.

    Args:
        path: Path to a ``.csv`` / ``.csv.bz2`` file.
        required: Columns that must be present and numeric.

    Returns:
        The full table.

    Raises:
        FileNotFoundError: If *path* does not exist.
        AccidentSchemaError: If a required column is missing or
            non-numeric.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    # low_memory=False: read in one pass so pandas does not emit
    # DtypeWarnings for the wide, mixed-type census columns.
    df = pd.read_csv(path, low_memory=False)
    log.debug("Loaded %d rows from %s", len(df), path, extra={"path": str(path)})

    return validate_accidents(df, required=required, source=str(path))


def read_year(year: Any, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Load one year and reduce it to ``[MONTH, year]``.

    Failures propagate; see :func:`read_years` for the isolated version.
    """
    df = read_accidents(resolve_path(year, data_dir), required=[MONTH])
    df = df.assign(**{YEAR: coerce_int(year)})
    return df[[MONTH, YEAR]]


def read_years(
    years: Union[Any, Sequence[Any]],
    data_dir: Optional[PathLike] = None,
) -> List[YearResult]:
    """
    Load several years, isolating each year's failure.

    Args:
        years: One year or a sequence of years.
        data_dir: Directory holding the census files.

    Returns:
        One :class:`YearResult` per requested year, in request order.
        A year whose file is missing or unreadable gets ``data=None``
        and an ``error`` message; the remaining years still load.
        One ``invalid year: <year>`` warning is logged per failed year.
    """
    results: List[YearResult] = []

    for year in _as_year_list(years):
        try:
            results.append(YearResult(year=year, data=read_year(year, data_dir)))
        except Exception as exc:
            results.append(YearResult(year=year, error=str(exc)))

    report_failures(results)
    return results


def report_failures(results: Iterable[YearResult]) -> int:
    """
    Log one warning per failed year.

    Returns:
        Number of failed years.
    """
    failed = 0
    for result in results:
        if result.ok:
            continue
        failed += 1
        log.warning(
            "invalid year: %s", result.year,
            extra={"year": result.year, "reason": result.error},
        )
    return failed


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _as_year_list(years: Union[Any, Sequence[Any]]) -> List[Any]:
    """Wrap a scalar year in a list; leave sequences as lists."""
    if isinstance(years, (str, bytes)) or not hasattr(years, '__iter__'):
        return [years]
    return list(years)
