"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames (or plain dicts) and return
transformed data.

Modules:
- schema:    Required accident columns and load-time validation
- summary:   Per-month counts and the wide month-by-year table
- geography: State selection, sentinel cleaning, point set and extent
"""

from .schema import (
    AccidentSchemaError,
    REQUIRED_COLUMNS,
    validate_accidents,
)

from .summary import (
    count_by_month,
    monthly_counts,
    pivot_counts,
    summarize,
)

from .geography import (
    BoundingBox,
    InvalidStateError,
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    accident_points,
    bounding_box,
    clean_coordinates,
    select_state,
)

__all__ = [
    # Schema
    'AccidentSchemaError',
    'REQUIRED_COLUMNS',
    'validate_accidents',
    # Summary
    'count_by_month',
    'monthly_counts',
    'pivot_counts',
    'summarize',
    # Geography
    'BoundingBox',
    'InvalidStateError',
    'LATITUDE_SENTINEL',
    'LONGITUDE_SENTINEL',
    'accident_points',
    'bounding_box',
    'clean_coordinates',
    'select_state',
]
