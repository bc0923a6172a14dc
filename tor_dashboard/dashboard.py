"""
Dashboard-ready output functions.

These are the primary entry points for the Streamlit front end. The
`get_*` functions are pure: CSV text in, plain dicts or DataFrames out.
The `fetch_*` wrappers download the sheet first and turn a transport
failure into a "no data" result.
"""

import logging
from typing import Sequence

import pandas as pd

from .columns import ColumnMap, find_column, normalise_header, resolve_columns
from .config import (
    BOLETIM_CATEGORIES,
    CSV_URL,
    DRUG_METRICS,
    KM_FALLBACK,
    KM_MATCHES,
    REPORT_DEFAULT_KM,
    REPORT_DEFAULT_TEAM,
    REPORT_DEFAULT_VTR,
    REPORT_DRUG_FIELDS,
    REPORT_SEIZURE_FIELDS,
    REPORT_STATUS,
    SEIZURE_METRICS,
    SUMMARY_FIELDS,
    SUMMARY_TREND_FIELDS,
    TEAM_COLUMN,
    TIMESTAMP_COLUMN,
    VOLUME_FIELDS,
    VTR_FALLBACK,
    VTR_MATCHES,
)
from .kpis import build_timeline, metric_with_trend, sum_column
from .loaders.sheet_export import TransportError, fetch_csv_text, tokenize_csv
from .loaders.utils import get_cell, parse_sheet_date, parse_sheet_number
from .periods import PeriodWindow, data_rows, filter_rows, mirror_prior_year

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "id", "timestamp", "team", "vtr", "km",
    "total_drugs", "total_seizures", "status",
]


def _prepare(csv_text: str) -> tuple[list[str], ColumnMap, list[Sequence[str]]]:
    grid = tokenize_csv(csv_text)
    header = grid[0] if grid else []
    return normalise_header(header), resolve_columns(header), data_rows(grid)


def get_productivity(csv_text: str, start=None, end=None) -> dict:
    """Period statistics compared against the same window one year earlier.

    Parameters
    ----------
    csv_text : Raw sheet export.
    start, end : Inclusive window bounds (date-like); None leaves a side open.

    Returns
    -------
    Dict with structure:
    {
        "drugs": [{"label", "value", "icon", "trend"}, ...],
        "seizures": [{"label", "value", "icon", "custom_icon", "trend"}, ...],
        "boletins": [{"name", "value", "color"}, ...],
        "summary": {"prisoes": "12", ..., "trends": {"prisoes": 20, ...}},
        "timeline": [{"month": "JAN/24", "value": 31.0}, ...],
    }
    """
    _, cols, rows = _prepare(csv_text)

    window = PeriodWindow(start, end)
    current_rows = filter_rows(rows, TIMESTAMP_COLUMN, window)
    prior_rows = filter_rows(rows, TIMESTAMP_COLUMN, mirror_prior_year(window))
    logger.info(
        "Selected %d current and %d prior-year rows out of %d",
        len(current_rows), len(prior_rows), len(rows),
    )

    def metric(key: str):
        return metric_with_trend(current_rows, prior_rows, cols[key])

    drugs = []
    for key, label, icon in DRUG_METRICS:
        m = metric(key)
        drugs.append({"label": label, "value": m["value"], "icon": icon, "trend": m["trend"]})

    seizures = []
    for key, label, icon, custom_icon in SEIZURE_METRICS:
        m = metric(key)
        seizures.append({
            "label": label,
            "value": m["value"],
            "icon": icon,
            "custom_icon": custom_icon,
            "trend": m["trend"],
        })

    boletins = [
        {"name": name, "value": sum_column(current_rows, cols[key]), "color": color}
        for key, name, color in BOLETIM_CATEGORIES
    ]

    summary: dict = {name: metric(key)["value"] for name, key in SUMMARY_FIELDS.items()}
    summary["trends"] = {name: metric(key)["trend"] for name, key in SUMMARY_TREND_FIELDS.items()}

    timeline = build_timeline(
        current_rows,
        TIMESTAMP_COLUMN,
        [cols[key] for key in VOLUME_FIELDS],
    )

    return {
        "drugs": drugs,
        "seizures": seizures,
        "boletins": boletins,
        "summary": summary,
        "timeline": timeline,
    }


def get_daily_reports(csv_text: str, start=None, end=None) -> pd.DataFrame:
    """One line per shift report in the window, most recent first.

    Rows whose timestamp cannot be parsed are kept, since they cannot be
    placed outside the window.

    Returns
    -------
    DataFrame with columns:
        id, timestamp, team, vtr, km, total_drugs, total_seizures, status
    """
    header, cols, rows = _prepare(csv_text)
    window = PeriodWindow(start, end)
    drug_cols = [cols[key] for key in REPORT_DRUG_FIELDS]
    seizure_cols = [cols[key] for key in REPORT_SEIZURE_FIELDS]
    vtr_col = find_column(header, VTR_MATCHES, VTR_FALLBACK)
    km_col = find_column(header, KM_MATCHES, KM_FALLBACK)

    records = []
    for idx, row in enumerate(rows):
        timestamp = get_cell(row, TIMESTAMP_COLUMN)
        row_date = parse_sheet_date(timestamp)
        if row_date is not None and not window.contains(row_date):
            continue

        drugs_total = sum(parse_sheet_number(get_cell(row, c)) for c in drug_cols)
        seizures_total = sum(parse_sheet_number(get_cell(row, c)) for c in seizure_cols)
        day_code = timestamp.split(" ")[0].replace("/", "")

        records.append({
            "id": f"TOR-{day_code}-{idx}",
            "timestamp": timestamp,
            "team": get_cell(row, TEAM_COLUMN) or REPORT_DEFAULT_TEAM,
            "vtr": get_cell(row, vtr_col) or REPORT_DEFAULT_VTR,
            "km": get_cell(row, km_col) or REPORT_DEFAULT_KM,
            "total_drugs": round(drugs_total, 1),
            "total_seizures": seizures_total,
            "status": REPORT_STATUS,
        })

    records.reverse()
    df = pd.DataFrame(records, columns=REPORT_COLUMNS)
    logger.info("Built %d daily reports", len(df))
    return df


def get_reports_overview(reports: pd.DataFrame) -> dict:
    """Headline figures for the report listing."""
    if reports.empty:
        return {"total_reports": 0, "total_seizures": 0.0, "avg_drugs": 0.0}
    return {
        "total_reports": len(reports),
        "total_seizures": float(reports["total_seizures"].sum()),
        "avg_drugs": round(float(reports["total_drugs"].mean()), 1),
    }


def get_latest_vehicle_km(csv_text: str, vehicle_id: str) -> float | None:
    """Most recent positive final odometer reading logged for a vehicle.

    The vehicle column matches when its text contains `vehicle_id`
    (case-insensitive), e.g. "TOR 0003" for "0003".
    """
    grid = tokenize_csv(csv_text)
    if len(grid) < 2:
        return None

    header = normalise_header(grid[0])
    vtr_col = find_column(header, VTR_MATCHES, VTR_FALLBACK)
    km_col = find_column(header, KM_MATCHES, KM_FALLBACK)
    wanted = vehicle_id.lower()

    for row in reversed(grid[1:]):
        if len(row) <= max(vtr_col, km_col):
            continue
        vtr_entry = row[vtr_col]
        if vtr_entry and wanted in vtr_entry.lower():
            km = parse_sheet_number(row[km_col])
            if km > 0:
                return km
    return None


# ---------------------------------------------------------------------------
# Fetching wrappers
# ---------------------------------------------------------------------------

def fetch_productivity(start=None, end=None, url: str = CSV_URL) -> dict | None:
    """Download the sheet and build period statistics; None if unreachable."""
    try:
        csv_text = fetch_csv_text(url)
    except TransportError:
        logger.exception("Sheet export unavailable, no productivity data this cycle")
        return None
    return get_productivity(csv_text, start, end)


def fetch_daily_reports(start=None, end=None, url: str = CSV_URL) -> pd.DataFrame:
    """Download the sheet and list daily reports; empty DataFrame if unreachable."""
    try:
        csv_text = fetch_csv_text(url)
    except TransportError:
        logger.exception("Sheet export unavailable, no reports this cycle")
        return pd.DataFrame(columns=REPORT_COLUMNS)
    return get_daily_reports(csv_text, start, end)


def fetch_latest_vehicle_km(vehicle_id: str, url: str = CSV_URL) -> float | None:
    """Download the sheet and look up a vehicle's odometer; None if unreachable."""
    try:
        csv_text = fetch_csv_text(url)
    except TransportError:
        logger.exception("Sheet export unavailable, cannot read odometer for %s", vehicle_id)
        return None
    return get_latest_vehicle_km(csv_text, vehicle_id)
