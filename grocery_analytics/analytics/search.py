"""
Item search — substring match on item name, spend and per-date history.
"""
from __future__ import annotations

import pandas as pd

from grocery_analytics.analytics.common import frame_records, safe_divide


def match_items(records: pd.DataFrame, term: str) -> pd.DataFrame:
    """Records whose item name contains ``term``, case-insensitively."""
    if records.empty:
        return records
    needle = term.lower()
    names = records["item"].fillna("").astype(str).str.lower()
    return records[names.str.contains(needle, regex=False)]


def purchase_history(results: pd.DataFrame) -> list[dict]:
    """Quantity and spend per date, oldest first.

    A missing or zero quantity counts as one unit.
    """
    if results.empty:
        return []
    qty = results["quantity"]
    qty = qty.where(qty.notna() & (qty != 0), 1.0)
    grouped = (
        results.assign(quantity=qty)
        .groupby("date", sort=True, dropna=False)
        .agg(quantity=("quantity", "sum"), total=("total", "sum"))
        .reset_index()
    )
    return [
        {"date": str(r["date"]), "quantity": float(r["quantity"]), "total": float(r["total"])}
        for _, r in grouped.iterrows()
    ]


def price_history(results: pd.DataFrame) -> list[dict]:
    """First unit price seen on each date, oldest first.

    Only lines with a non-zero price and quantity count. Later prices on the
    same date are ignored rather than averaged.
    """
    if results.empty:
        return []
    price, qty = results["price"], results["quantity"]
    priced = results[price.notna() & (price != 0) & qty.notna() & (qty != 0)]
    if priced.empty:
        return []
    first = priced.groupby("date", sort=True, dropna=False)["price"].first()
    return [{"date": str(date), "price": float(p)} for date, p in first.items()]


def search_items(records: pd.DataFrame, term: str | None) -> dict | None:
    """Search result for ``term``, or None when the term is blank."""
    if not term or not term.strip():
        return None

    results = match_items(records, term)
    total_spent = float(results["total"].sum()) if not results.empty else 0.0
    count = int(len(results))

    return {
        "term": term,
        "count": count,
        "total_spent": total_spent,
        "avg_price": safe_divide(total_spent, count),
        "results": frame_records(results),
        "purchase_history": purchase_history(results),
        "price_history": price_history(results),
    }
