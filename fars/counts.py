"""
Month x year accident counts
============================

The summary table is built in two explicit steps:

1) `count_month_year` groups a long (MONTH, year) table into a nested map
   `{month: {year: count}}`. Only combinations seen in the data get a key.
2) `to_summary_table` reshapes that map long-to-wide: one row per month,
   one column per year. A month/year pair with no key is left as <NA>
   (pandas' nullable missing value), never filled with 0.

Example:
    counts = {1: {2013: 3, 2014: 5}, 2: {2014: 1}}

        year   2013  2014
        MONTH
        1         3     5
        2      <NA>     1
"""

from __future__ import annotations
from typing import Dict, List

import pandas as pd

MonthYearCounts = Dict[int, Dict[int, int]]


def count_month_year(frame: pd.DataFrame) -> MonthYearCounts:
    """Count rows per (MONTH, year) of a long table."""
    counts: MonthYearCounts = {}
    if frame.empty:
        return counts
    sizes = frame.groupby(["year", "MONTH"]).size()
    for (year, month), n in sizes.items():
        counts.setdefault(int(month), {})[int(year)] = int(n)
    return counts


def observed_years(counts: MonthYearCounts) -> List[int]:
    years = set()
    for by_year in counts.values():
        years.update(by_year)
    return sorted(years)


def to_summary_table(counts: MonthYearCounts) -> pd.DataFrame:
    """Materialize the wide table from observed keys only."""
    months = sorted(counts)
    index = pd.Index(months, name="MONTH")
    columns = {
        str(y): pd.array([counts[m].get(y, pd.NA) for m in months], dtype="Int64")
        for y in observed_years(counts)
    }
    out = pd.DataFrame(columns, index=index)
    out.columns.name = "year"
    return out
