"""
Dashboard analytics — category, store, month, top-item and trip summaries.

Every function takes the normalized records frame and returns plain
lists/dicts. Nothing is cached or mutated, so calling them twice on the same
frame gives identical output. Ties keep input order (stable sorts,
first-appearance grouping).
"""
from __future__ import annotations

import pandas as pd

from grocery_analytics.config import CRV_CATEGORY, MONTH_KEY_LENGTH, TOP_ITEMS_LIMIT
from grocery_analytics.analytics.common import pct_of_total, safe_divide


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _grand_total(records: pd.DataFrame) -> float:
    """Sum of every record's total, CRV included."""
    return float(records["total"].sum()) if not records.empty else 0.0


def _without_crv(records: pd.DataFrame) -> pd.DataFrame:
    return records[records["category"] != CRV_CATEGORY]


def _share_table(records: pd.DataFrame, key: str, grand_total: float) -> list[dict]:
    """Sum totals by ``key``, largest first, with each group's share of grand_total."""
    if records.empty:
        return []

    grouped = (
        records.groupby(key, sort=False, dropna=False)["total"].sum()
        .reset_index(name="value")
        .sort_values("value", ascending=False, kind="stable")
    )
    return [
        {
            "name": str(r[key]),
            "value": float(r["value"]),
            "percentage": round(float(pct_of_total(r["value"], grand_total)), 1),
        }
        for _, r in grouped.iterrows()
    ]


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------

def category_summary(records: pd.DataFrame) -> list[dict]:
    """Spend per category, CRV left out.

    Percentages are taken against the grand total *including* CRV, so they
    sum to slightly under 100 when deposits are present.
    """
    return _share_table(_without_crv(records), "category", _grand_total(records))


def store_summary(records: pd.DataFrame) -> list[dict]:
    """Spend per store, CRV included."""
    return _share_table(records, "store", _grand_total(records))


def monthly_summary(records: pd.DataFrame) -> list[dict]:
    """Spend per YYYY-MM, oldest first. Dates without a '-' are skipped."""
    if records.empty:
        return []

    dates = records["date"].astype(str)
    dated = records[dates.str.contains("-", regex=False)]
    if dated.empty:
        return []

    months = dated["date"].astype(str).str[:MONTH_KEY_LENGTH]
    grouped = dated.groupby(months, sort=True)["total"].sum()
    return [{"month": str(month), "spent": float(spent)} for month, spent in grouped.items()]


def top_items(records: pd.DataFrame, limit: int = TOP_ITEMS_LIMIT) -> list[dict]:
    """Most frequently purchased items (by line count), CRV left out."""
    items = _without_crv(records)
    if items.empty:
        return []

    grouped = (
        items.groupby("item", sort=False, dropna=False).agg(
            count=("total", "size"),
            total=("total", "sum"),
            category=("category", "first"),
        )
        .reset_index()
        .sort_values("count", ascending=False, kind="stable")
        .head(limit)
    )

    rows = []
    for _, r in grouped.iterrows():
        count = int(r["count"])
        total = float(r["total"])
        rows.append({
            "name": str(r["item"]),
            "count": count,
            "total": total,
            "category": str(r["category"]),
            "avg_price": round(safe_divide(total, count), 2),
        })
    return rows


def trip_summary(records: pd.DataFrame) -> dict:
    """Trips (records sharing a date string) and overall spend stats."""
    total_spent = _grand_total(records)
    crv_total = float(records.loc[records["category"] == CRV_CATEGORY, "total"].sum()) if not records.empty else 0.0

    if records.empty:
        trips: list[dict] = []
    else:
        grouped = records.groupby("date", sort=True, dropna=False).agg(
            total=("total", "sum"),
            items=("total", "size"),
        ).reset_index()
        trips = [
            {"date": str(r["date"]), "total": float(r["total"]), "items": int(r["items"])}
            for _, r in grouped.iterrows()
        ]

    total_trips = len(trips)
    return {
        "stats": {
            "total_spent": total_spent,
            "total_trips": total_trips,
            "avg_per_trip": safe_divide(total_spent, total_trips),
            "total_items": int(len(records)),
            "crv_total": crv_total,
        },
        "trips": trips,
    }


def build_dashboard(records: pd.DataFrame) -> dict:
    """All dashboard aggregates for one record set."""
    trips = trip_summary(records)
    return {
        "stats": trips["stats"],
        "categories": category_summary(records),
        "stores": store_summary(records),
        "monthly": monthly_summary(records),
        "top_items": top_items(records),
        "trips": trips["trips"],
    }
