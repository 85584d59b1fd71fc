"""
Dataset loader (accident_<year>.csv.bz2 -> DataFrame)
=====================================================

FARS ships one compressed CSV per year. This module knows how to:
- turn a year into the file name it lives under (`make_filename`),
- read such a file into a pandas DataFrame (`read_table`),
- list which years are present in the data directory (`available_years`).

Key ideas:
- A year that cannot be read as an integer is not an error here: we warn
  and build the `accident_NA.csv.bz2` name. Reading that file then fails,
  which is where callers find out.
- `read_table` is the only place that touches the filesystem.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, List, Optional
import logging
import re
import warnings

import pandas as pd
from pandas.errors import DtypeWarning

from .config import FarsConfig, resolve_config
from .models import CoercionWarning, NotFoundError

logger = logging.getLogger(__name__)


def _to_int(x) -> Optional[int]:
    """Convert a year/state value to int, returning None if missing/invalid."""
    if isinstance(x, str):
        x = x.strip()
    try:
        if pd.isna(x):
            return None
    except (TypeError, ValueError):
        # list-likes are not scalars, let int() reject them below
        pass
    try:
        return int(float(x))
    except (TypeError, ValueError, OverflowError):
        return None


def coerce_int(value: Any) -> Optional[int]:
    """Like `_to_int`, but warns with CoercionWarning when the value is lost."""
    out = _to_int(value)
    if out is None:
        warnings.warn(f"NAs introduced by coercion: {value!r}", CoercionWarning, stacklevel=3)
    return out


def make_filename(year: Any, *, config: Optional[FarsConfig] = None) -> str:
    """Return the full path of the data file for `year`.

    make_filename(2013)   -> ".../accident_2013.csv.bz2"
    make_filename("2015") -> ".../accident_2015.csv.bz2"
    make_filename("abc")  -> ".../accident_NA.csv.bz2" (+ CoercionWarning)

    The file is not required to exist.
    """
    config = resolve_config(config)
    y = coerce_int(year)
    token = str(y) if y is not None else config.na_token
    return str(Path(config.data_dir) / config.filename_pattern.format(year=token))


def read_table(filename: str) -> pd.DataFrame:
    """Read one (possibly compressed) CSV file into a DataFrame.

    Raises:
        NotFoundError: if `filename` does not exist.
    """
    if not Path(filename).exists():
        raise NotFoundError(str(filename))
    # Mixed-type columns are common in FARS exports; pandas' dtype chatter
    # is noise for callers.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DtypeWarning)
        df = pd.read_csv(filename)
    logger.debug("Loaded %d rows from %s", len(df), filename)
    return df


def available_years(*, config: Optional[FarsConfig] = None) -> List[int]:
    """Years for which a data file exists in the data directory (sorted)."""
    config = resolve_config(config)
    data_dir = Path(config.data_dir)
    if not data_dir.is_dir():
        return []
    # accident_{year}.csv.bz2 -> ^accident_(\d+)\.csv\.bz2$
    pattern = re.compile(
        "^" + re.escape(config.filename_pattern).replace(re.escape("{year}"), r"(\d+)") + "$"
    )
    years: List[int] = []
    for p in data_dir.iterdir():
        m = pattern.match(p.name)
        if m and p.is_file():
            years.append(int(m.group(1)))
    return sorted(years)
