"""
State accident map
==================

`map_state(state_id, year)` draws one dot per accident of a state on top of
the US state outlines, zoomed to where the accidents are.

Design notes:
- Coordinates are never edited in place. `valid_coordinates` returns a
  boolean mask and everything downstream (axis range, dots) uses it.
- FARS writes "not recorded" coordinates as out-of-range numbers
  (LONGITUD > 900, LATITUDE > 90). Those rows get no dot and do not
  stretch the visible range.
- The base map is pluggable: any callable `base_map(ax, region, xlim, ylim)`
  works. The default reads US state boundaries with geopandas.
"""

from __future__ import annotations
from typing import Any, Callable, Optional, Tuple
import logging

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes

from .config import FarsConfig, resolve_config
from .loader import coerce_int, make_filename, read_table
from .models import InvalidStateError

logger = logging.getLogger(__name__)

Range = Tuple[float, float]
BaseMap = Callable[[Axes, str, Range, Range], None]

NO_ACCIDENTS = "no accidents to plot"


def _valid_values(values: pd.Series, limit: float) -> pd.Series:
    v = pd.to_numeric(values, errors="coerce")
    return np.isfinite(v) & (v <= limit)


def valid_longitude(frame: pd.DataFrame, config: Optional[FarsConfig] = None) -> pd.Series:
    """True where LONGITUD is recorded (not missing, not the > 900 sentinel)."""
    return _valid_values(frame["LONGITUD"], resolve_config(config).max_longitude)


def valid_latitude(frame: pd.DataFrame, config: Optional[FarsConfig] = None) -> pd.Series:
    """True where LATITUDE is recorded (not missing, not the > 90 sentinel)."""
    return _valid_values(frame["LATITUDE"], resolve_config(config).max_latitude)


def valid_coordinates(frame: pd.DataFrame, config: Optional[FarsConfig] = None) -> pd.Series:
    """True for rows whose (LONGITUD, LATITUDE) is a real position."""
    return valid_longitude(frame, config) & valid_latitude(frame, config)


def geopandas_base_map(boundaries: str) -> BaseMap:
    """Base map drawing state outlines read from `boundaries`."""

    def _draw(ax: Axes, region: str, xlim: Range, ylim: Range) -> None:
        if region != "state":
            raise ValueError(f"Unsupported map region: {region!r} (only 'state')")
        # Lazy import: geopandas is only needed when the default map is drawn.
        try:
            import geopandas as gpd
        except ImportError as e:
            raise ImportError(
                "Missing dependency: geopandas.\n"
                "Install it with: python -m pip install geopandas"
            ) from e
        states = gpd.read_file(boundaries)
        # clip to the accidents' range before drawing
        states = states.cx[xlim[0]:xlim[1], ylim[0]:ylim[1]]
        states.boundary.plot(ax=ax, color="black", linewidth=0.5)

    return _draw


def _padded(lo: float, hi: float, pad: float = 0.5) -> Range:
    # matplotlib refuses an empty range (a single accident)
    if lo == hi:
        return lo - pad, hi + pad
    return lo, hi


def map_state(
    state_id: Any,
    year: Any,
    *,
    ax: Optional[Axes] = None,
    base_map: Optional[BaseMap] = None,
    config: Optional[FarsConfig] = None,
) -> Optional[Axes]:
    """Plot the accidents of one state for one year.

    Returns the axes drawn on, or None when there is nothing to plot. In
    that case "no accidents to plot" is logged at INFO on the `fars.plotting`
    logger; it is only visible once the caller enables INFO logging
    (e.g. `logging.basicConfig(level=logging.INFO)`).

    Raises:
        NotFoundError: no data file for `year`.
        InvalidStateError: `state_id` does not occur in that year's STATE column.
    """
    config = resolve_config(config)
    data = read_table(make_filename(year, config=config))
    state = coerce_int(state_id)

    states = pd.to_numeric(data["STATE"], errors="coerce")
    if state is None or not (states == state).any():
        raise InvalidStateError(state if state is not None else config.na_token)

    subset = data.loc[states == state]
    if subset.empty:
        logger.info(NO_ACCIDENTS)
        return None

    # Each axis range uses every value recorded on that axis, even when the
    # other coordinate of the same row is a sentinel.
    lons = pd.to_numeric(subset.loc[valid_longitude(subset, config), "LONGITUD"]).to_numpy(dtype=float)
    lats = pd.to_numeric(subset.loc[valid_latitude(subset, config), "LATITUDE"]).to_numpy(dtype=float)
    if lons.size == 0 or lats.size == 0:
        # no recorded position on at least one axis
        logger.info(NO_ACCIDENTS)
        return None
    xlim = (float(lons.min()), float(lons.max()))
    ylim = (float(lats.min()), float(lats.max()))

    # a dot needs both coordinates
    points = subset.loc[valid_coordinates(subset, config)]
    lon = pd.to_numeric(points["LONGITUD"]).to_numpy(dtype=float)
    lat = pd.to_numeric(points["LATITUDE"]).to_numpy(dtype=float)

    if ax is None:
        _, ax = plt.subplots()
    if base_map is None:
        base_map = geopandas_base_map(config.boundaries)
    base_map(ax, config.region, xlim, ylim)
    ax.set_xlim(*_padded(*xlim))
    ax.set_ylim(*_padded(*ylim))

    ax.scatter(lon, lat, s=config.marker_size, marker=".", color="black")
    logger.debug("Plotted %d of %d accidents for STATE %d in %s", len(points), len(subset), state, year)
    return ax
