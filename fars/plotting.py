from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from .config import (
    LAND_COLOR,
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    MAP_HEIGHT,
    MAP_PADDING_DEG,
    MAP_WIDTH,
    MARKER_COLOR,
    MARKER_SIZE,
    STATE_NAMES,
    SUBUNIT_COLOR,
)
from .errors import InvalidStateError
from .reader import fars_read, resolve_path, validate_accidents

logger = logging.getLogger(__name__)

HOVER_TEMPLATE_POINT = (
    "Latitude: %{lat:.4f}<br>"
    "Longitude: %{lon:.4f}<extra></extra>"
)

Range = Tuple[float, float]


# ============================================================
# Helper functions
# ============================================================


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates (LONGITUD > 900, LATITUDE > 90) with NaN.
    """
    out = df.copy()
    out["LONGITUD"] = out["LONGITUD"].where(out["LONGITUD"] <= LONGITUDE_SENTINEL)
    out["LATITUDE"] = out["LATITUDE"].where(out["LATITUDE"] <= LATITUDE_SENTINEL)
    return out


def coordinate_ranges(points: pd.DataFrame) -> Tuple[Range, Range]:
    """
    Latitude and longitude ranges of non-empty points with both coordinates set.
    """
    lat = points["LATITUDE"]
    lon = points["LONGITUD"]
    return (float(lat.min()), float(lat.max())), (float(lon.min()), float(lon.max()))


def _state_label(state_num: int) -> str:
    return STATE_NAMES.get(state_num, f"State {state_num}")


# ============================================================
# Main plotting functions
# ============================================================


def create_state_map(
    points: pd.DataFrame,
    *,
    lat_range: Range,
    lon_range: Range,
    title: str | None = None,
    padding: float = MAP_PADDING_DEG,
) -> go.Figure:
    """
    Draw state outlines scoped to the given ranges with one marker per point.

    Parameters
    ----------
    points : pd.DataFrame
        Rows with non-missing 'LATITUDE' and 'LONGITUD'.
    lat_range, lon_range : tuple of float
        (min, max) bounds of the accidents; widened by ``padding`` degrees.
    title : str | None, default None
        Optional figure title.
    padding : float, default MAP_PADDING_DEG
        Degrees added on each side so single-point maps have an extent.

    Returns
    -------
    go.Figure
        A Plotly Figure with a single geo subplot.
    """
    fig = go.Figure(
        go.Scattergeo(
            lon=points["LONGITUD"],
            lat=points["LATITUDE"],
            mode="markers",
            marker=dict(size=MARKER_SIZE, color=MARKER_COLOR, opacity=0.8),
            hovertemplate=HOVER_TEMPLATE_POINT,
            showlegend=False,
        )
    )

    fig.update_geos(
        resolution=50,
        projection_type="mercator",
        showsubunits=True,
        subunitcolor=SUBUNIT_COLOR,
        showcountries=True,
        showland=True,
        landcolor=LAND_COLOR,
        lataxis_range=[lat_range[0] - padding, lat_range[1] + padding],
        lonaxis_range=[lon_range[0] - padding, lon_range[1] + padding],
    )
    fig.update_layout(
        title=title,
        width=MAP_WIDTH,
        height=MAP_HEIGHT,
        margin=dict(t=60, l=20, r=20, b=20),
    )
    return fig


def fars_map_state(
    state_num: int | str,
    year: int | str,
    data_dir: str | Path | None = None,
    *,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state in one year.

    Parameters
    ----------
    state_num : int | str
        FARS state code.
    year : int | str
        Census year; its file must exist (FileNotFoundError otherwise).
    data_dir : str | Path | None, default None
        Directory holding the accident files; the working directory if None.
    show : bool, default True
        Display the figure once built.

    Returns
    -------
    go.Figure | None
        The map, or None when the state has no accidents to plot.

    Raises
    ------
    InvalidStateError
        If ``state_num`` does not occur in the year's STATE column.
    """
    state = int(state_num)
    data = validate_accidents(fars_read(resolve_path(year, data_dir)))

    if state not in set(data["STATE"].dropna().astype(int)):
        raise InvalidStateError(state)

    subset = sanitize_coordinates(data[(data["STATE"] == state).fillna(False)])
    points = subset.dropna(subset=["LATITUDE", "LONGITUD"])
    if points.empty:
        logger.info("no accidents to plot")
        return None

    dropped = len(subset) - len(points)
    if dropped:
        logger.debug("Skipping %d accident(s) without usable coordinates", dropped)

    lat_range, lon_range = coordinate_ranges(points)
    fig = create_state_map(
        points,
        lat_range=lat_range,
        lon_range=lon_range,
        title=f"<b>Fatal accidents in {_state_label(state)}, {int(year)}</b>",
    )
    if show:
        fig.show()
    return fig
