"""
Data model (errors + per-year outcomes)
======================================

Tables themselves are plain pandas DataFrames. This module holds the small
types that travel around them:

- `YearResult`: the outcome of loading one year. Batch operations return a
  list of these so that a failed year shows up as a value, not an exception.
- The error/warning taxonomy used across the package.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd


class NotFoundError(FileNotFoundError):
    """Raised when a data file does not exist."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"file '{filename}' does not exist")
        self.path = filename


class InvalidStateError(ValueError):
    """Raised when a STATE number is not present in the loaded year."""

    def __init__(self, state: Any) -> None:
        super().__init__(f"invalid STATE number: {state}")
        self.state = state


class CoercionWarning(UserWarning):
    """A year or state id could not be read as an integer."""


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of loading one requested year.

    Exactly one of `table` / `error` is set.
    """
    year: Any                       # as requested by the caller
    path: str
    table: Optional[pd.DataFrame] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.table is not None
