"""
Metric computation functions: pure functions with no side effects.

Provides column sums, year-over-year trend, value formatting, and the
monthly volume timeline.
"""

import logging
import math
from typing import Iterable, Sequence, TypedDict

import pandas as pd

from .config import MONTH_LABELS
from .loaders.utils import get_cell, parse_sheet_date, parse_sheet_number

logger = logging.getLogger(__name__)


class MetricResult(TypedDict):
    value: str
    trend: int


def sum_column(rows: Iterable[Sequence[str]], index: int) -> float:
    """Sum the normalised numeric value of column `index` over `rows`."""
    return sum((parse_sheet_number(get_cell(row, index)) for row in rows), 0.0)


def calc_trend(current: float, previous: float) -> int:
    """Return the percentage change from `previous` to `current`.

    A previous value of zero gives 100 when current is positive, else 0.
    Halves round up (-2.5 -> -2, 2.5 -> 3).
    """
    if previous == 0:
        return 100 if current > 0 else 0
    return math.floor((current - previous) / previous * 100 + 0.5)


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_metric_value(value: float) -> str:
    """Render a metric for display.

    Values of 1000 and above use pt-BR grouping ("1.500", "12.345,5");
    smaller values are plain digit strings ("5", "1.5").
    """
    if value >= 1000:
        text = f"{value:,.3f}".rstrip("0").rstrip(".")
        return text.translate(str.maketrans({",": ".", ".": ","}))
    return _plain_number(value)


def metric_with_trend(
    current_rows: Sequence[Sequence[str]],
    prior_rows: Sequence[Sequence[str]],
    index: int,
) -> MetricResult:
    """Formatted current-period sum and its trend against the prior period."""
    current = sum_column(current_rows, index)
    previous = sum_column(prior_rows, index)
    return {
        "value": format_metric_value(current),
        "trend": calc_trend(current, previous),
    }


def month_label(year: int, month: int) -> str:
    """Timeline bucket label, e.g. "DEZ/23"."""
    return f"{MONTH_LABELS[month - 1]}/{year % 100:02d}"


def build_timeline(
    rows: Iterable[Sequence[str]],
    date_index: int,
    volume_indices: Sequence[int],
) -> list[dict]:
    """Aggregate a composite volume per calendar month.

    Each row contributes the sum of its `volume_indices` cells to the bucket
    of its parsed date. Rows with unparseable dates are ignored. Buckets are
    ordered by year, then month position, never by label text.

    Returns
    -------
    List of {"month": "MMM/YY", "value": float} in chronological order.
    """
    buckets: dict[tuple[int, int], float] = {}
    for row in rows:
        row_date = parse_sheet_date(get_cell(row, date_index))
        if row_date is None:
            continue
        volume = sum(parse_sheet_number(get_cell(row, c)) for c in volume_indices)
        key = (row_date.year, row_date.month)
        buckets[key] = buckets.get(key, 0) + volume

    logger.info("Built timeline with %d monthly buckets", len(buckets))
    return [
        {"month": month_label(year, month), "value": buckets[(year, month)]}
        for year, month in sorted(buckets)
    ]


def timeline_frame(timeline: list[dict]) -> pd.DataFrame:
    """Timeline as a DataFrame (columns: month, value) for charting."""
    if not timeline:
        return pd.DataFrame(columns=["month", "value"])
    return pd.DataFrame(timeline, columns=["month", "value"])
