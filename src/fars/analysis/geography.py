"""
FARS Accident Geography (Functional Core)

Pure functions for the state map: select one state's records, blank out
the census "unknown location" sentinels, and derive the point set and
bounding box handed to the plotting layer.

Package Location: src/fars/analysis/geography.py

Sentinel Rule:
    The census encodes an unknown position with out-of-range codes
    (e.g. LONGITUD 999.9999, LATITUDE 99.9999).  Any LONGITUD above
    ``LONGITUDE_SENTINEL`` or LATITUDE above ``LATITUDE_SENTINEL`` is
    replaced with NaN.  The thresholds are census format constants, not
    general validity ranges; the boundary values themselves are kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from .schema import LATITUDE, LONGITUD, STATE, coerce_int

LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0


class InvalidStateError(ValueError):
    """Raised when a state number does not occur in the STATE column."""

    def __init__(self, state_num: Any) -> None:
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


@dataclass(frozen=True)
class BoundingBox:
    """Longitude/latitude extent of a point set, in degrees."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float

    @property
    def lon_range(self) -> list:
        return [self.lon_min, self.lon_max]

    @property
    def lat_range(self) -> list:
        return [self.lat_min, self.lat_max]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """
    Return the rows of *df* whose ``STATE`` equals *state_num*.

    Args:
        df: Full accident table for one year.
        state_num: State code; any numeric-like value (``6``, ``"6.0"``).

    Returns:
        Copy of the matching rows, original index kept.

    Raises:
        InvalidStateError: If *state_num* is not among the distinct
            ``STATE`` values of *df*.
    """
    state_num = coerce_int(state_num)

    if state_num not in set(df[STATE].dropna().unique()):
        raise InvalidStateError(state_num)

    return df.loc[df[STATE] == state_num].copy()


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Returns a new DataFrame; *df* is not modified.  ``LONGITUD`` and
    ``LATITUDE`` are returned as ``float64``.
    """
    out = df.copy()
    out[LONGITUD] = out[LONGITUD].astype('float64')
    out[LATITUDE] = out[LATITUDE].astype('float64')

    out.loc[out[LONGITUD] > LONGITUDE_SENTINEL, LONGITUD] = np.nan
    out.loc[out[LATITUDE] > LATITUDE_SENTINEL, LATITUDE] = np.nan
    return out


def accident_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a cleaned table that have both coordinates present."""
    return df.dropna(subset=[LONGITUD, LATITUDE])


def bounding_box(points: pd.DataFrame) -> BoundingBox:
    """
    Extent of *points* (output of :func:`accident_points`).

    Raises:
        ValueError: If *points* is empty.
    """
    if points.empty:
        raise ValueError("Cannot compute a bounding box for zero points")

    return BoundingBox(
        lon_min=float(points[LONGITUD].min()),
        lon_max=float(points[LONGITUD].max()),
        lat_min=float(points[LATITUDE].min()),
        lat_max=float(points[LATITUDE].max()),
    )
