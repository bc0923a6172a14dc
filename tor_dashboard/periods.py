"""
Period windows and row filtering at day granularity.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Sequence

import pandas as pd

from .loaders.utils import get_cell, parse_sheet_date, rollover_date

logger = logging.getLogger(__name__)

DateLike = date | datetime | pd.Timestamp | str


def _day(value: DateLike | None) -> pd.Timestamp | None:
    if value is None:
        return None
    if isinstance(value, str):
        # Strings use the sheet's DD/MM/YYYY layout, never month-first
        parsed = parse_sheet_date(value)
        if parsed is None:
            raise ValueError(f"Unrecognised date {value!r}, expected DD/MM/YYYY")
        return parsed.normalize()
    return pd.Timestamp(value).normalize()


@dataclass(frozen=True)
class PeriodWindow:
    """Closed date range compared by calendar day. A missing bound is open."""

    start: pd.Timestamp | None = None
    end: pd.Timestamp | None = None

    def __post_init__(self):
        object.__setattr__(self, "start", _day(self.start))
        object.__setattr__(self, "end", _day(self.end))

    def contains(self, moment: DateLike) -> bool:
        day = _day(moment)
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


def _shift_year_back(day: pd.Timestamp | None) -> pd.Timestamp | None:
    if day is None:
        return None
    # Feb 29 carries into Mar 1 of the previous year
    return rollover_date(day.year - 1, day.month, day.day)


def mirror_prior_year(window: PeriodWindow) -> PeriodWindow:
    """Same calendar window one year earlier (year - 1, same month and day)."""
    return PeriodWindow(_shift_year_back(window.start), _shift_year_back(window.end))


def data_rows(grid: Sequence[Sequence[str]]) -> list[Sequence[str]]:
    """Data rows of a grid: skips the header, blank lines and rows without a timestamp."""
    return [r for r in grid[1:] if len(r) > 1 and r[0] != ""]


def filter_rows(
    rows: Sequence[Sequence[str]],
    date_index: int,
    window: PeriodWindow,
) -> list[Sequence[str]]:
    """Rows whose date cell parses and falls inside `window`."""
    selected = []
    skipped = 0
    for row in rows:
        row_date = parse_sheet_date(get_cell(row, date_index))
        if row_date is None:
            skipped += 1
            continue
        if window.contains(row_date):
            selected.append(row)

    if skipped:
        logger.debug("Skipped %d row(s) with unparseable dates", skipped)
    return selected
