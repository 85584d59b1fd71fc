"""
Multi-year extraction and summary
=================================

This is the aggregation side of the package:

1) `extract_years` loads every requested year independently and reports a
   `YearResult` per year. A missing or unreadable year becomes a failed
   result; it never stops the other years from loading.
2) `read_years` is the list-of-tables view of the same thing: failed years
   are warned about ("invalid year: ...") and show up as None.
3) `summarize_years` stacks the surviving (MONTH, year) tables and counts
   accidents per month and year (see `counts.py`).

Nothing is cached: asking for the same year twice reads the file twice.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Optional
import logging
import warnings

import pandas as pd

from .config import FarsConfig, resolve_config
from .counts import count_month_year, to_summary_table
from .loader import _to_int, make_filename, read_table
from .models import YearResult

logger = logging.getLogger(__name__)

# Anything read_table / the MONTH projection can raise for one bad file.
# NotFoundError is an OSError; pandas' ParserError/EmptyDataError and
# decoding errors are ValueErrors; a truncated bz2 stream raises EOFError.
_LOAD_ERRORS = (OSError, EOFError, ValueError, KeyError)


def _month_year(table: pd.DataFrame, year: Optional[int]) -> pd.DataFrame:
    """Project a year table down to its (MONTH, year) pairs."""
    return table.assign(year=year if year is not None else pd.NA)[["MONTH", "year"]]


def extract_years(years: Iterable[Any], *, config: Optional[FarsConfig] = None) -> List[YearResult]:
    """Load each year and keep only MONTH + year, one result per input year.

    Order of the output matches the order of `years`.
    """
    config = resolve_config(config)
    results: List[YearResult] = []
    for year in years:
        path = make_filename(year, config=config)
        try:
            table = _month_year(read_table(path), _to_int(year))
        except _LOAD_ERRORS as e:
            logger.debug("Year %r failed to load from %s: %s", year, path, e)
            results.append(YearResult(year=year, path=path, error=e))
            continue
        results.append(YearResult(year=year, path=path, table=table))
    return results


def read_years(years: Iterable[Any], *, config: Optional[FarsConfig] = None) -> List[Optional[pd.DataFrame]]:
    """Return a (MONTH, year) table per year, or None where the year failed.

    Each failed year emits one "invalid year: <year>" warning.
    """
    out: List[Optional[pd.DataFrame]] = []
    for r in extract_years(years, config=config):
        if not r.ok:
            warnings.warn(f"invalid year: {r.year}", stacklevel=2)
        out.append(r.table)
    return out


def summarize_years(years: Iterable[Any], *, config: Optional[FarsConfig] = None) -> pd.DataFrame:
    """Accident counts with one row per MONTH and one column per year.

    Years that failed to load are left out (read_years already warned).
    Month/year combinations without accidents are <NA>, not 0.
    If nothing loaded the result is an empty DataFrame.
    """
    tables = [t for t in read_years(years, config=config) if t is not None]
    if not tables:
        return to_summary_table({})
    stacked = pd.concat(tables, ignore_index=True)
    logger.debug("Summarizing %d accidents across %d year table(s)", len(stacked), len(tables))
    return to_summary_table(count_month_year(stacked))
