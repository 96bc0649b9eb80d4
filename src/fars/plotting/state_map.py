"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: cleaned accident points + their bounding box.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

The base map is plotly's built-in outline geography (coastlines, country
and US state borders) on an equirectangular projection, clipped to the
bounding box of the points.  Each accident is one small marker.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.geography import BoundingBox
from ..analysis.schema import LATITUDE, LONGITUD

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MARKER_STYLE: Dict[str, Any] = {
    'color': 'black',
    'size':  2,
    'opacity': 0.8,
}

_OUTLINE_COLOR: str = 'grey'

# A degenerate extent (a single point, or points on one meridian or
# parallel) is widened to at least this many degrees, centred on the data.
_MIN_SPAN_DEGREES: float = 0.5


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    points: pd.DataFrame,
    bbox: BoundingBox,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build a point map of accident locations.

    Args:
        points: DataFrame with non-missing ``LONGITUD`` and ``LATITUDE``
            columns (output of ``accident_points``).
        bbox: Extent of *points*; sets the visible lon/lat window.  An
            axis whose extent is narrower than ``_MIN_SPAN_DEGREES`` is
            widened to that span around its centre.
        title: Optional figure title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If *points* is missing a coordinate column.
    """
    missing = [c for c in (LONGITUD, LATITUDE) if c not in points.columns]
    if missing:
        raise ValueError(f"points is missing required columns: {missing}")

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=points[LONGITUD],
        lat=points[LATITUDE],
        mode='markers',
        marker=dict(_MARKER_STYLE),
        name='Accident',
        showlegend=False,
        hovertemplate=(
            "Lon: %{lon:.4f}<br>"
            "Lat: %{lat:.4f}<extra></extra>"
        ),
    ))

    fig.update_geos(
        projection_type='equirectangular',
        resolution=50,
        showcoastlines=True,
        coastlinecolor=_OUTLINE_COLOR,
        showcountries=True,
        countrycolor=_OUTLINE_COLOR,
        showsubunits=True,
        subunitcolor=_OUTLINE_COLOR,
        showland=False,
        lonaxis_range=_axis_range(bbox.lon_min, bbox.lon_max),
        lataxis_range=_axis_range(bbox.lat_min, bbox.lat_max),
    )

    fig.update_layout(
        title=title,
        template='plotly_white',
        margin=dict(l=10, r=10, t=50 if title else 10, b=10),
    )

    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _axis_range(lo: float, hi: float) -> List[float]:
    """``[lo, hi]``, widened to ``_MIN_SPAN_DEGREES`` when narrower."""
    if hi - lo >= _MIN_SPAN_DEGREES:
        return [lo, hi]
    centre = (lo + hi) / 2.0
    half = _MIN_SPAN_DEGREES / 2.0
    return [centre - half, centre + half]
