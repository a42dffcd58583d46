#!/usr/bin/env python3
"""
Grocery Analytics CLI — spending summary, item search, Excel export, API server.

USAGE:
  python -m grocery_analytics.cli summary receipts.csv           # Dashboard tables
  python -m grocery_analytics.cli search receipts.csv "milk"     # Item search
  python -m grocery_analytics.cli export receipts.csv            # Excel workbook
  python -m grocery_analytics.cli export receipts.csv --output ./out/report.xlsx

  python -m grocery_analytics.cli serve                          # Start API server
  python -m grocery_analytics.cli serve --port 8000 --reload
"""
from __future__ import annotations

import argparse
import os
from pathlib import Path

from grocery_analytics.config import REPORTS_FOLDER
from grocery_analytics.data.loader import read_csv_text
from grocery_analytics.errors import IngestError
from grocery_analytics.logging_setup import configure_logging
from grocery_analytics.state import (
    DashboardState,
    DashboardStatus,
    SearchState,
    SearchStatus,
    ingest_path,
    load_search_records,
    search,
)


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  GROCERY ANALYTICS — {title}")
    print("=" * 70)


def _load_dashboard(csv_path: str) -> DashboardState | None:
    state = ingest_path(DashboardState(), Path(csv_path))
    if state.status != DashboardStatus.READY:
        print(f"  Could not load {csv_path}: {state.error}")
        return None
    return state


def cmd_summary(args) -> int:
    """Print the dashboard tables."""
    _banner("SPENDING SUMMARY")
    state = _load_dashboard(args.csv)
    if state is None:
        return 1

    data = state.summary
    s = data["stats"]
    r = state.report
    print(f"\n  Rows read: {r.rows_read:,}  |  kept: {r.rows_kept:,}  |  dropped: {r.rows_rejected:,}")
    print(f"\n  Total spent:     ${s['total_spent']:>12,.2f}")
    print(f"  Shopping trips:  {s['total_trips']:>13,}")
    print(f"  Avg. per trip:   ${s['avg_per_trip']:>12,.2f}")
    print(f"  Total items:     {s['total_items']:>13,}")

    for title, key in [("BY CATEGORY", "categories"), ("BY STORE", "stores")]:
        print(f"\n{title}:\n")
        for row in data[key]:
            print(f"  {row['name'][:40]:<42}${row['value']:>10,.2f}  {row['percentage']:>5.1f}%")

    print("\nBY MONTH:\n")
    for row in data["monthly"]:
        print(f"  {row['month']:<42}${row['spent']:>10,.2f}")

    print("\nTOP ITEMS:\n")
    for i, row in enumerate(data["top_items"], 1):
        print(f"  {i:<4}{row['name'][:36]:<38}{row['count']:>5}x  ${row['total']:>9,.2f}  avg ${row['avg_price']:,.2f}")
    print()
    return 0


def cmd_search(args) -> int:
    """Search purchases by item name."""
    _banner("ITEM SEARCH")
    try:
        text = read_csv_text(Path(args.csv))
    except IngestError as exc:
        print(f"  Could not load {args.csv}: {exc}")
        return 1

    loaded = load_search_records(SearchState(), text, args.csv)
    if loaded.error:
        print(f"  Could not load {args.csv}: {loaded.error}")
        return 1

    view = search(loaded, args.term)
    if view.status == SearchStatus.IDLE:
        print("  Enter a search term")
        return 1
    if view.status == SearchStatus.NO_RESULTS:
        print(f'\n  No results found for "{args.term}"\n')
        return 0

    res = view.result
    print(f"\n  Total purchases: {res['count']:,}")
    print(f"  Total spent:     ${res['total_spent']:,.2f}")
    print(f"  Avg price:       ${res['avg_price']:,.2f}")

    print("\nPURCHASE HISTORY:\n")
    for row in res["purchase_history"]:
        print(f"  {row['date']:<14}{row['quantity']:>8g}  ${row['total']:>9,.2f}")

    print("\nPURCHASE DETAILS:\n")
    for row in res["results"]:
        qty = "" if row["quantity"] is None else f"{row['quantity']:g}"
        price = 0.0 if row["price"] is None else row["price"]
        print(f"  {row['date']:<12}{row['store'][:18]:<20}{row['item'][:28]:<30}"
              f"{qty:>6} {row['unit'][:6]:<7}${price:>7,.2f}  ${row['total']:>8,.2f}")
    print()
    return 0


def cmd_export(args) -> int:
    """Write the dashboard aggregates to Excel."""
    from grocery_analytics.reports.spending_report import generate_excel

    _banner("EXCEL EXPORT")
    state = _load_dashboard(args.csv)
    if state is None:
        return 1

    out = Path(args.output) if args.output else REPORTS_FOLDER / "Grocery_Spending_Report.xlsx"
    path = generate_excel(state, out)
    print(f"\n  Saved: {path}\n")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Grocery Analytics API on port {args.port}...")
    uvicorn.run("grocery_analytics.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Grocery Analytics — grocery receipt spending analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: GROCERY_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    summary_parser = subparsers.add_parser("summary", help="Print spending summary tables")
    summary_parser.add_argument("csv", help="Receipt CSV (Date,Store,Category,Item,Quantity,Unit,Price,Total)")
    summary_parser.set_defaults(func=cmd_summary)

    search_parser = subparsers.add_parser("search", help="Search purchases by item name")
    search_parser.add_argument("csv", help="Receipt CSV")
    search_parser.add_argument("term", help="Item name fragment (case-insensitive)")
    search_parser.set_defaults(func=cmd_search)

    export_parser = subparsers.add_parser("export", help="Export spending summary to Excel")
    export_parser.add_argument("csv", help="Receipt CSV")
    export_parser.add_argument("--output", help="Output .xlsx path (default: reports folder)")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address (default 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
