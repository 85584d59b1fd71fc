"""
Configuration (FarsConfig)
==========================

All knobs the package needs live in one frozen dataclass so that every public
operation can take an explicit `config=` and stay free of global state.

- `data_dir` is where the per-year `accident_<year>.csv.bz2` files live.
  By default it is the `extdata/` folder shipped inside the package; set
  `FARS_DATA_DIR` to point somewhere else.
- `boundaries` is anything `geopandas.read_file` accepts (path or URL) that
  holds US state outlines. Set `FARS_BOUNDARIES` to use a local copy.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "extdata"

# US Census cartographic boundary file (states, 1:20,000,000)
CENSUS_STATES_URL = "https://www2.census.gov/geo/tiger/GENZ2018/shp/cb_2018_us_state_20m.zip"


@dataclass(frozen=True)
class FarsConfig:
    """Where to find the data and how to interpret it."""
    data_dir: Path = field(default=PACKAGE_DATA_DIR)
    filename_pattern: str = "accident_{year}.csv.bz2"
    # printed in place of a year that could not be read as an integer
    na_token: str = "NA"

    # FARS encodes "not recorded" coordinates as values out of range
    max_longitude: float = 900.0
    max_latitude: float = 90.0

    region: str = "state"
    boundaries: str = CENSUS_STATES_URL
    marker_size: float = 1.0

    @classmethod
    def from_env(cls) -> "FarsConfig":
        """Build a config, honouring FARS_DATA_DIR and FARS_BOUNDARIES."""
        data_dir = os.environ.get("FARS_DATA_DIR")
        boundaries = os.environ.get("FARS_BOUNDARIES")
        return cls(
            data_dir=Path(data_dir) if data_dir else PACKAGE_DATA_DIR,
            boundaries=boundaries or CENSUS_STATES_URL,
        )


def resolve_config(config: Optional[FarsConfig]) -> FarsConfig:
    return config if config is not None else FarsConfig.from_env()
