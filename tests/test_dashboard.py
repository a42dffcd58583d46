import pandas as pd
import pytest

from grocery_analytics.analytics.dashboard import (
    build_dashboard,
    category_summary,
    monthly_summary,
    store_summary,
    top_items,
    trip_summary,
)
from grocery_analytics.data import empty_records, normalize_rows


def _records(rows):
    df, _ = normalize_rows(rows)
    return df


def test_category_summary_excludes_crv_and_sorts_desc(records):
    cats = category_summary(records)
    assert [c["name"] for c in cats] == ["Dairy", "Pantry", "Bakery", "Produce"]
    assert cats[0]["value"] == pytest.approx(11.25)
    assert "CRV" not in {c["name"] for c in cats}


def test_category_percentages_use_total_including_crv(records):
    cats = category_summary(records)
    # 11.25 / 29.04
    assert cats[0]["percentage"] == 38.7
    assert sum(c["percentage"] for c in cats) < 100


def test_category_values_plus_crv_equal_grand_total(records):
    cats = category_summary(records)
    stats = trip_summary(records)["stats"]
    assert sum(c["value"] for c in cats) + stats["crv_total"] == pytest.approx(records["total"].sum())
    assert stats["crv_total"] == pytest.approx(0.20)


def test_store_summary_includes_crv(records):
    stores = store_summary(records)
    assert [s["name"] for s in stores] == ["Safeway", "Costco", "Trader Joe's"]
    assert stores[0]["value"] == pytest.approx(12.45)
    assert sum(s["value"] for s in stores) == pytest.approx(29.04)



def test_equal_values_keep_first_appearance_order():
    rows = [
        ["2025-03-01", "Zeta Mart", "Snacks", "Chips", "1", "bag", "2.00", "2.00"],
        ["2025-03-01", "Alpha Foods", "Bakery", "Roll", "1", "ea", "1.50", "1.50"],
        ["2025-03-02", "Alpha Foods", "Bakery", "Bun", "1", "ea", "0.50", "0.50"],
        ["2025-03-02", "Zeta Mart", "Produce", "Lime", "1", "ea", "0.25", "0.25"],
        ["2025-03-02", "Alpha Foods", "Produce", "Lemon", "1", "ea", "0.25", "0.25"],
    ]
    df = _records(rows)
    assert [c["name"] for c in category_summary(df)] == ["Snacks", "Bakery", "Produce"]
    assert [s["name"] for s in store_summary(df)] == ["Zeta Mart", "Alpha Foods"]


def test_monthly_summary_keys_and_order(records):
    months = monthly_summary(records)
    assert [m["month"] for m in months] == ["2025-01", "2025-02"]
    assert months[0]["spent"] == pytest.approx(14.10)
    assert months[1]["spent"] == pytest.approx(14.94)


def test_monthly_summary_skips_dates_without_dash():
    df = _records([
        ["20250301", "A", "X", "thing", "1", "ea", "1", "1"],
        ["2025-03-02", "A", "X", "thing", "1", "ea", "1", "2"],
    ])
    assert monthly_summary(df) == [{"month": "2025-03", "spent": 2.0}]


def test_top_items_ranked_by_count_with_stable_ties(records):
    items = top_items(records)
    assert [i["name"] for i in items] == [
        "Whole Milk", "Bananas", "Sourdough Bread", "Almond Milk", "Peanut Butter",
    ]
    bananas = items[1]
    assert bananas["count"] == 2
    assert bananas["total"] == pytest.approx(3.60)
    assert bananas["avg_price"] == 1.8
    assert bananas["category"] == "Produce"


def test_top_items_limited_to_ten_and_no_crv():
    rows = [["2025-01-01", "S", "Misc", f"item{i}", "1", "ea", "1", "1"] for i in range(15)]
    rows += [["2025-01-01", "S", "CRV", "CRV", "1", "ea", "0.05", "0.05"]] * 20
    items = top_items(_records(rows))
    assert len(items) == 10
    assert all(i["category"] != "CRV" for i in items)
    assert [i["name"] for i in items] == [f"item{i}" for i in range(10)]


def test_trip_summary_counts_distinct_dates(records):
    result = trip_summary(records)
    stats = result["stats"]
    assert stats["total_trips"] == records["date"].nunique() == 4
    assert stats["total_items"] == 9
    assert stats["total_spent"] == pytest.approx(29.04)
    assert stats["avg_per_trip"] == pytest.approx(7.26)
    assert [t["date"] for t in result["trips"]] == ["2025-01-05", "2025-01-06", "2025-02-02", "2025-02-10"]
    assert result["trips"][0]["items"] == 3


def test_empty_record_set_gives_zeros_not_nan():
    summary = build_dashboard(empty_records())
    assert summary["stats"] == {
        "total_spent": 0.0,
        "total_trips": 0,
        "avg_per_trip": 0.0,
        "total_items": 0,
        "crv_total": 0.0,
    }
    for key in ("categories", "stores", "monthly", "top_items", "trips"):
        assert summary[key] == []


def test_zero_grand_total_percentages_are_zero():
    df = _records([["2025-01-01", "S", "Misc", "freebie", "1", "ea", "0", "0"]])
    assert category_summary(df)[0]["percentage"] == 0.0
    assert store_summary(df)[0]["percentage"] == 0.0


def test_build_dashboard_is_idempotent(records):
    snapshot = records.copy()
    first = build_dashboard(records)
    second = build_dashboard(records)
    assert first == second
    pd.testing.assert_frame_equal(records, snapshot)
