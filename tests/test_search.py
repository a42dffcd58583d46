import pytest

from grocery_analytics.analytics.search import price_history, purchase_history, search_items
from grocery_analytics.data import empty_records, normalize_rows


def test_milk_example():
    df, _ = normalize_rows([
        ["2025-01-05", "Safeway", "Dairy", "Whole Milk", "1", "gal", "3.50", "3.50"],
        ["2025-01-06", "Trader Joe's", "Dairy", "Almond Milk", "1", "qt", "4.00", "4.00"],
        ["2025-01-06", "Trader Joe's", "Bakery", "Bagels", "1", "bag", "3.00", "3.00"],
    ])
    result = search_items(df, "milk")
    assert result["count"] == 2
    assert result["total_spent"] == pytest.approx(7.50)
    assert len(result["purchase_history"]) == 2
    assert result["avg_price"] == pytest.approx(3.75)


def test_search_is_case_insensitive(records):
    assert search_items(records, "MILK")["count"] == 3
    assert search_items(records, "peanut")["results"][0]["item"] == "Peanut Butter"


@pytest.mark.parametrize("term", ["", "   ", None])
def test_blank_term_is_a_no_op(records, term):
    assert search_items(records, term) is None


def test_no_matches_yields_empty_result(records):
    result = search_items(records, "caviar")
    assert result["count"] == 0
    assert result["total_spent"] == 0.0
    assert result["avg_price"] == 0.0
    assert result["results"] == []
    assert result["purchase_history"] == []
    assert result["price_history"] == []


def test_search_on_empty_records():
    assert search_items(empty_records(), "milk")["count"] == 0


def test_purchase_history_defaults_missing_quantity_to_one(records):
    result = search_items(records, "bananas")
    assert result["purchase_history"] == [
        {"date": "2025-01-06", "quantity": 6.0, "total": 1.5},
        {"date": "2025-02-10", "quantity": 1.0, "total": 2.1},
    ]


def test_results_keep_missing_values_as_none(records):
    rows = search_items(records, "bananas")["results"]
    assert rows[1]["quantity"] is None
    assert rows[1]["price"] is None
    assert rows[1]["unit"] == "bunch"


def test_price_history_keeps_first_price_per_date():
    df, _ = normalize_rows([
        ["2025-03-02", "B", "Dairy", "Milk", "1", "gal", "4.10", "4.10"],
        ["2025-03-01", "A", "Dairy", "Milk", "1", "gal", "3.90", "3.90"],
        ["2025-03-01", "B", "Dairy", "Milk", "1", "gal", "4.50", "4.50"],
        ["2025-03-03", "A", "Dairy", "Milk", "", "gal", "4.00", "4.00"],
        ["2025-03-04", "A", "Dairy", "Milk", "1", "gal", "0", "0"],
    ])
    assert price_history(df) == [
        {"date": "2025-03-01", "price": 3.9},
        {"date": "2025-03-02", "price": 4.1},
    ]
    assert [h["date"] for h in purchase_history(df)] == [
        "2025-03-01", "2025-03-02", "2025-03-03", "2025-03-04",
    ]
