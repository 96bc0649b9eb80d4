"""
FARS Map Generator (Imperative Shell)

Thin orchestration layer: loads one year's census file through
data/reader.py, calls the functional core to select and clean a state's
records, builds the figure with the plotting package, and optionally
writes HTML.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import map_state

    fig = map_state(6, 2013, data_dir="data", output_path="ca_2013.html")
    # Writes ca_2013.html; returns the Figure (or None if nothing to plot)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import plotly.graph_objects as go

from ..analysis.geography import (
    accident_points,
    bounding_box,
    clean_coordinates,
    select_state,
)
from ..analysis.schema import coerce_int
from ..data.reader import PathLike, read_accidents, resolve_path
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)

NO_DATA_MESSAGE: str = "no accidents to plot"


def map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
) -> Optional[go.Figure]:
    """
    Plot accident locations for one state and year.

    Loads the full ``accident_<year>.csv.bz2`` table (all columns, not the
    monthly projection), keeps the rows for *state_num*, blanks the
    census "unknown location" sentinels and maps what is left.

    Args:
        state_num: State code, coerced to ``int`` (``"6.0"`` -> ``6``).
        year: Census year.
        data_dir: Directory holding the census files.
        output_path: When provided, the figure is also written here as a
            standalone HTML file.

    Returns:
        The figure, or ``None`` when the state has no locatable accidents
        (an ``INFO`` notice is logged instead).

    Raises:
        FileNotFoundError: If the year's file does not exist.
        AccidentSchemaError: If the file lacks a required column.
        InvalidStateError: If *state_num* does not occur in ``STATE``.
    """
    state_num = coerce_int(state_num)
    df = read_accidents(resolve_path(year, data_dir))

    df_state = select_state(df, state_num)
    if df_state.empty:
        _log_no_data(state_num, year)
        return None

    points = accident_points(clean_coordinates(df_state))
    if points.empty:
        _log_no_data(state_num, year)
        return None

    fig = plot_state_map(
        points,
        bounding_box(points),
        title=f"Fatal accidents – STATE {state_num}, {year}",
    )
    log.info(
        "Mapped %d of %d accident(s) for STATE %d, %s",
        len(points), len(df_state), state_num, year,
        extra={"state_num": state_num, "year": year},
    )

    if output_path is not None:
        _write_html(fig, output_path)

    return fig


def _log_no_data(state_num: int, year: Any) -> None:
    log.info(NO_DATA_MESSAGE, extra={"state_num": state_num, "year": year})


def _write_html(fig: go.Figure, output_path: PathLike) -> Path:
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(out_path), include_plotlyjs='cdn')
    log.info("Wrote map to %s", out_path, extra={"path": str(out_path)})
    return out_path
