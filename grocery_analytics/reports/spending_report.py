"""
Grocery Spending Report — dashboard aggregates as JSON or a styled workbook.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from grocery_analytics.analytics.common import sanitize_for_json
from grocery_analytics.excel.writer import ExcelWriter
from grocery_analytics.state import DashboardState


SHARE_COLS = [
    ("name", "text", "Name"),
    ("value", "currency", "Amount"),
    ("percentage", "percent", "Percentage"),
]

MONTH_COLS = [
    ("month", "text", "Month"),
    ("spent", "currency", "Spent"),
]

TOP_ITEM_COLS = [
    ("name", "text", "Item"),
    ("category", "text", "Category"),
    ("count", "number", "Purchases"),
    ("total", "currency", "Total Spent"),
    ("avg_price", "currency", "Avg Price"),
]

TRIP_COLS = [
    ("date", "text", "Date"),
    ("items", "number", "Items"),
    ("total", "currency", "Total"),
]


def date_range(state: DashboardState) -> str:
    """First and last receipt date, or N/A."""
    trips = (state.summary or {}).get("trips") or []
    if not trips:
        return "N/A"
    return f"{trips[0]['date']} to {trips[-1]['date']}"


def generate_json(state: DashboardState) -> dict:
    """Dashboard view as a JSON-safe dict."""
    return sanitize_for_json({
        "status": state.status.value,
        "source": state.source,
        "error": state.error,
        "ingest": state.report.to_dict() if state.report else None,
        "date_range": date_range(state),
        **(state.summary or {
            "stats": None, "categories": [], "stores": [], "monthly": [], "top_items": [], "trips": [],
        }),
    })


def generate_excel(state: DashboardState, output_path: str | Path) -> Path:
    """Write the dashboard aggregates to an .xlsx file."""
    if state.summary is None:
        raise ValueError("No receipt data loaded")

    data = generate_json(state)
    s = data["stats"]
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    ew.write_title(ws, "GROCERY SPENDING",
                   f"Spending Analysis  |  {data['date_range']}  |  Generated {pd.Timestamp.now():%B %d, %Y}")
    row = ew.write_section(ws, 5, "OVERVIEW")
    ew.write_kpi_row(ws, row, [
        (s["total_spent"], "TOTAL SPENT", "currency"),
        (s["total_trips"], "SHOPPING TRIPS", "number"),
        (s["avg_per_trip"], "AVG. PER TRIP", "currency"),
        (s["total_items"], "TOTAL ITEMS", "number"),
    ])

    for sheet_name, key, cols, total in [
        ("By Category", "categories", SHARE_COLS, True),
        ("By Store", "stores", SHARE_COLS, True),
        ("By Month", "monthly", MONTH_COLS, True),
        ("Top Items", "top_items", TOP_ITEM_COLS, False),
        ("Trips", "trips", TRIP_COLS, True),
    ]:
        ws_d = ew.add_sheet(sheet_name)
        ew.write_table(ws_d, 1, cols, data[key], show_total=total)

    return ew.save(output_path)
