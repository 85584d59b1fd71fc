"""
FARS package
============

Tools for the US Fatality Analysis Reporting System (FARS) accident files,
one `accident_<year>.csv.bz2` per year.

- File names and reading are in `fars/loader.py`.
- Multi-year loading and the month x year summary are in `fars/engine.py`.
- The per-state accident map is in `fars/plotting.py`.
"""

from .config import FarsConfig
from .engine import extract_years, read_years, summarize_years
from .loader import available_years, make_filename, read_table
from .models import CoercionWarning, InvalidStateError, NotFoundError, YearResult
from .plotting import map_state, valid_coordinates, valid_latitude, valid_longitude

__version__ = '0.1.0'

__all__ = [
    "FarsConfig",
    "YearResult",
    "NotFoundError",
    "InvalidStateError",
    "CoercionWarning",
    "make_filename",
    "read_table",
    "available_years",
    "extract_years",
    "read_years",
    "summarize_years",
    "map_state",
    "valid_coordinates",
    "valid_longitude",
    "valid_latitude",
]
