"""
TOR Activity Dashboard: end-to-end analytics pipeline.

Runs the full pipeline from the sheet export to dashboard-ready outputs
and prints smoke-test summaries.

Usage:
    python main.py [--start 01/01/2024] [--end 31/03/2024] [--offline]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from tor_dashboard.columns import resolve_columns
from tor_dashboard.config import CSV_URL
from tor_dashboard.dashboard import (
    get_daily_reports,
    get_latest_vehicle_km,
    get_productivity,
    get_reports_overview,
)
from tor_dashboard.loaders import TransportError, fetch_csv_text, parse_sheet_date, tokenize_csv
from tor_dashboard.simulator import generate_activity_csv

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TOR dashboard pipeline smoke test")
    parser.add_argument("--start", help="window start, DD/MM/YYYY")
    parser.add_argument("--end", help="window end, DD/MM/YYYY")
    parser.add_argument("--url", default=CSV_URL, help="sheet CSV export URL")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="use a simulated export instead of the published sheet",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the full analytics pipeline and print smoke-test outputs."""
    args = _parse_args(argv)
    start = parse_sheet_date(args.start) if args.start else None
    end = parse_sheet_date(args.end) if args.end else None

    print("=" * 70)
    print("  TOR ACTIVITY DASHBOARD")
    print("  Analytics Pipeline Smoke Test")
    print("=" * 70)
    print()

    # ------------------------------------------------------------------
    # 1. Load source data
    # ------------------------------------------------------------------
    print("[ 1 ] LOADING SHEET EXPORT")
    print("-" * 40)

    if args.offline:
        csv_text = generate_activity_csv()
        print("\nUsing simulated export")
    else:
        try:
            csv_text = fetch_csv_text(args.url)
        except TransportError as e:
            logger.warning("No data available this cycle: %s", e)
            return 1

    grid = tokenize_csv(csv_text)
    print(f"\nGrid: {len(grid)} rows (including header)")
    if not grid:
        return 1

    cols = resolve_columns(grid[0])
    print(f"Columns resolved: {len(cols)} ({len(cols.fallbacks)} via fallback index)")
    for key in sorted(cols.fallbacks):
        print(f"  fallback  {key:16s} -> column {cols[key]}")

    # ------------------------------------------------------------------
    # 2. Productivity
    # ------------------------------------------------------------------
    print("\n")
    print("[ 2 ] PRODUCTIVITY")
    print("-" * 40)

    data = get_productivity(csv_text, start, end)

    print("\nDrugs:")
    for m in data["drugs"]:
        print(f"  {m['label']:20s} {m['value']:>12s}  {m['trend']:+d}%")

    print("\nSeizures:")
    for m in data["seizures"]:
        print(f"  {m['label']:20s} {m['value']:>12s}  {m['trend']:+d}%")

    print("\nBoletins:")
    for b in data["boletins"]:
        print(f"  {b['name']:6s} {b['value']:>10,.0f}")

    print("\nSummary:")
    for name, value in data["summary"].items():
        if name != "trends":
            print(f"  {name:20s} {value:>12s}")
    print(f"  trends: {data['summary']['trends']}")

    print("\nTimeline:")
    for bucket in data["timeline"]:
        print(f"  {bucket['month']:8s} {bucket['value']:>10,.0f}")

    # ------------------------------------------------------------------
    # 3. Reports
    # ------------------------------------------------------------------
    print("\n")
    print("[ 3 ] DAILY REPORTS")
    print("-" * 40)

    reports = get_daily_reports(csv_text, start, end)
    print(f"\n{len(reports)} reports")
    if not reports.empty:
        print(reports.head(10).to_string(index=False))
    print(f"\nOverview: {get_reports_overview(reports)}")

    if not reports.empty:
        vtr = reports.iloc[0]["vtr"]
        print(f"\nLatest odometer for {vtr}: {get_latest_vehicle_km(csv_text, vtr)}")

    print("\n" + "=" * 70)
    print("  Pipeline complete.")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
