"""Data ingestion for the published activity sheet export."""

from .sheet_export import TransportError, fetch_csv_text, tokenize_csv
from .utils import get_cell, parse_sheet_date, parse_sheet_number

__all__ = [
    "TransportError",
    "fetch_csv_text",
    "tokenize_csv",
    "get_cell",
    "parse_sheet_date",
    "parse_sheet_number",
]
