"""
FARS Accident Record Schema (Functional Core)

Names the columns every accident file must provide and checks a loaded
DataFrame against them.  Validation happens once, right after the file
is parsed, so that a file with a missing or non-numeric column fails
with a clear message instead of a ``KeyError`` deep inside aggregation
or plotting.

Package Location: src/fars/analysis/schema.py

Record fields:

    STATE     : int    state code (1-56 in the census numbering)
    MONTH     : int    1-12
    LONGITUD  : float  degrees; values > 900 mean "unknown"
    LATITUDE  : float  degrees; values > 90 mean "unknown"

Any other column in the file is passed through untouched.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

import pandas as pd

STATE: str = 'STATE'
MONTH: str = 'MONTH'
LONGITUD: str = 'LONGITUD'
LATITUDE: str = 'LATITUDE'

REQUIRED_COLUMNS: Tuple[str, ...] = (STATE, MONTH, LONGITUD, LATITUDE)


class AccidentSchemaError(ValueError):
    """
    Raised when an accident table does not match the expected schema.

    Raised when:
    - A required column is absent
    - A required column holds non-numeric values
    """
    pass


def coerce_int(value: Any) -> int:
    """
    ``int`` value of a numeric-like scalar.

    Accepts ints, floats, numpy scalars and numeric strings, so ``2013``,
    ``"2013"`` and ``"2013.0"`` all give ``2013`` (fractions truncate).
    Used for both census years and STATE codes.

    Raises:
        ValueError: If *value* is not numeric.
    """
    if isinstance(value, str):
        return int(float(value.strip()))
    return int(value)


def validate_accidents(
    df: pd.DataFrame,
    required: Iterable[str] = REQUIRED_COLUMNS,
    source: str = '<table>',
) -> pd.DataFrame:
    """
    Check that *df* carries every required column with a numeric dtype.

    Column names are matched exactly (case-sensitive), as stored in the
    census files.  A required column with no values at all (a header-only
    file, or every cell blank) is accepted and cast to ``float64``; pandas
    reads such columns as ``object``.

    Args:
        df: Freshly loaded accident table.
        required: Column names that must be present and numeric.
        source: Label used in error messages (normally the file path).

    Returns:
        *df*, with all-null required columns cast to ``float64``.

    Raises:
        AccidentSchemaError: If any required column is missing or
            non-numeric.
    """
    required = list(required)

    missing: List[str] = [col for col in required if col not in df.columns]
    if missing:
        raise AccidentSchemaError(
            f"{source}: missing required column(s): {', '.join(missing)}"
        )

    non_numeric: List[str] = []
    for col in required:
        if pd.api.types.is_numeric_dtype(df[col]):
            continue
        if df[col].isna().all():
            df[col] = df[col].astype('float64')
            continue
        non_numeric.append(col)

    if non_numeric:
        raise AccidentSchemaError(
            f"{source}: non-numeric values in column(s): "
            f"{', '.join(non_numeric)}"
        )

    return df
