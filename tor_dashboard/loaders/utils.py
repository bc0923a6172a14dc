"""
Shared utilities for sheet ingestion: cell access, date normalisation,
numeric normalisation of free-text spreadsheet cells.
"""

import logging
import math
import re
from typing import Sequence

import pandas as pd

logger = logging.getLogger(__name__)

# Markers removed before deciding whether a cell holds free text
_MARKER_RE = re.compile(r"(R\$|KM|\s)", re.IGNORECASE)
_LETTER_RE = re.compile(r"[a-zA-Z]")
_NON_NUMERIC_RE = re.compile(r"[^0-9,.\-]")
# Longest leading float literal, e.g. "1.5.3" -> "1.5", "12-4" -> "12"
_FLOAT_PREFIX_RE = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")
_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+")


def get_cell(row: Sequence[str], index: int) -> str:
    """Return the cell at `index`, or "" when the row is too short."""
    if 0 <= index < len(row):
        return row[index]
    return ""


def _to_int(segment: str) -> int | None:
    """Leading integer of a date segment ("2024\\t08:00" -> 2024), else None."""
    match = _LEADING_INT_RE.match(segment)
    if match is None:
        return None
    return int(match.group(0))


def parse_sheet_date(raw: str | None) -> pd.Timestamp | None:
    """Convert a "DD/MM/YYYY[ HH:MM:SS]" sheet timestamp to a noon Timestamp.

    Only the part before the first space is read. The result is always set
    to 12:00:00 on the parsed calendar day so day-level comparisons never
    cross a midnight boundary. Out-of-range days and months roll over into
    the following period (31/02/2024 -> 02/03/2024). Returns None for empty
    input, a wrong number of segments, or a segment without leading digits.
    """
    if not raw:
        return None
    date_part = raw.strip().split(" ")[0]
    parts = date_part.split("/")
    if len(parts) != 3:
        return None

    day, month, year = (_to_int(p) for p in parts)
    if day is None or month is None or year is None:
        return None

    return rollover_date(year, month, day)


def rollover_date(year: int, month: int, day: int) -> pd.Timestamp | None:
    """Build a noon Timestamp, carrying overflowing months and days forward.

    Returns None when the carried date falls outside the Timestamp range.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        first = pd.Timestamp(year=year, month=month, day=1, hour=12)
        return first + pd.Timedelta(days=day - 1)
    except (ValueError, OverflowError):
        logger.debug("Date out of range: %s-%s-%s", year, month, day)
        return None


def _parse_float_prefix(text: str) -> float | None:
    match = _FLOAT_PREFIX_RE.match(text)
    if match is None:
        return None
    return float(match.group(0))


def parse_sheet_number(raw: str | None) -> float:
    """Coerce a free-text sheet cell to a float, returning 0 when unusable.

    Order of checks
    ---------------
    1. Strip "R$", "KM" and whitespace; any letter left means the cell is
       text typed into a numeric column -> 0.
    2. Keep only digits, ".", "," and "-" from the raw value.
    3. A comma means Brazilian format: dots are thousands separators and
       the comma is the decimal point ("1.500,00" -> 1500.0).
    4. Without a comma, a dot followed by exactly three digits at the end
       is read as a thousands separator ("1.500" -> 1500.0, "1.5" -> 1.5).
    5. Anything that still fails to parse, or overflows to infinity, -> 0.

    A genuine three-decimal fraction such as "1.234" is read as 1234.
    """
    if not raw:
        return 0.0

    if _LETTER_RE.search(_MARKER_RE.sub("", raw)):
        return 0.0

    clean = _NON_NUMERIC_RE.sub("", raw)
    if not clean:
        return 0.0

    if "," in clean:
        clean = clean.replace(".", "").replace(",", ".", 1)
    elif "." in clean and len(clean.split(".")[-1]) == 3:
        clean = clean.replace(".", "")

    parsed = _parse_float_prefix(clean)
    if parsed is None or not math.isfinite(parsed):
        return 0.0
    return parsed
