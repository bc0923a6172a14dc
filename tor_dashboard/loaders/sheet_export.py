"""
Loader for the published Google Sheets CSV export.

The daily activity form writes one row per shift report:
    Column A: submission timestamp (DD/MM/YYYY HH:MM:SS)
    Columns B-D: team, vehicle, final odometer
    Remaining columns: counters and seizure quantities, free-text cells
"""

import logging

import requests

from ..config import CSV_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """The CSV export could not be retrieved (network error or non-2xx)."""


def fetch_csv_text(url: str = CSV_URL, timeout: float = REQUEST_TIMEOUT) -> str:
    """Download the sheet export as text.

    Raises
    ------
    TransportError
        On connection failures, timeouts, and non-2xx responses.
    """
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise TransportError(f"Failed to fetch sheet export: {exc}") from exc

    # requests assumes ISO-8859-1 for text/* without a charset
    if "charset" not in r.headers.get("Content-Type", "").lower():
        r.encoding = "utf-8"
    text = r.text
    logger.info("Fetched sheet export: %d characters", len(text))
    return text


def _finish_cell(cell: str) -> str:
    cell = cell.strip()
    if len(cell) >= 2 and cell[0] == '"' and cell[-1] == '"':
        cell = cell[1:-1]
    return cell


def tokenize_csv(text: str) -> list[list[str]]:
    """Split CSV text into a grid of trimmed string cells.

    Quoted fields may contain commas and newlines; a doubled quote inside a
    quoted field is a literal quote. An unterminated quote is not an error,
    the text is simply finalised at the end of input. A last row without a
    trailing newline is kept when it has any content.
    """
    text = text.replace("\r\n", "\n")
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        if char == '"':
            if in_quotes and i + 1 < n and text[i + 1] == '"':
                cell.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            row.append(_finish_cell("".join(cell)))
            cell = []
        elif char == "\n" and not in_quotes:
            row.append(_finish_cell("".join(cell)))
            rows.append(row)
            row = []
            cell = []
        else:
            cell.append(char)
        i += 1

    if row or cell:
        row.append(_finish_cell("".join(cell)))
        rows.append(row)

    return rows
