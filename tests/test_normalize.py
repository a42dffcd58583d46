import pandas as pd
import pytest

from grocery_analytics.data import (
    NormalizeReport,
    ParseOptions,
    coerce_number,
    empty_records,
    is_valid_row,
    load_records,
    normalize_rows,
    parse_delimited,
)
from grocery_analytics.config import RECEIPT_COLUMNS
from grocery_analytics.errors import IngestError


GOOD_ROW = ["2025-01-05", "Safeway", "Dairy", "Whole Milk", "1", "gal", "3.50", "3.50"]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("3.50", 3.5),
        (" 4 ", 4.0),
        ("-1.25", -1.25),
        (".5", 0.5),
        ("1e2", 100.0),
        (7, 7.0),
        (2.5, 2.5),
        ("N/A", None),
        ("", None),
        ("$3.50", None),
        ("1,000", None),
        ("inf", None),
        ("nan", None),
        (float("nan"), None),
        (True, None),
        (None, None),
    ],
)
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_row_with_six_columns_is_rejected():
    assert not is_valid_row(GOOD_ROW[:6])
    df, report = normalize_rows([GOOD_ROW[:6]])
    assert df.empty
    assert report.rows_rejected == 1


def test_row_with_non_numeric_total_is_rejected():
    row = GOOD_ROW[:7] + ["N/A"]
    assert not is_valid_row(row)
    df, _ = normalize_rows([row, GOOD_ROW])
    assert len(df) == 1
    assert df.iloc[0]["item"] == "Whole Milk"


def test_other_type_mismatches_are_tolerated():
    row = ["2025-01-05", "Safeway", "Dairy", "Eggs", "a dozen", "ea", "", "4.25"]
    df, report = normalize_rows([row])
    assert report == NormalizeReport(rows_read=1, rows_kept=1)
    rec = df.iloc[0]
    assert rec["total"] == 4.25
    assert pd.isna(rec["quantity"])
    assert pd.isna(rec["price"])


def test_extra_columns_are_ignored():
    df, _ = normalize_rows([GOOD_ROW + ["extra", "cols"]])
    assert list(df.columns) == RECEIPT_COLUMNS
    assert df.iloc[0]["total"] == 3.5


def test_input_order_is_preserved():
    rows = [
        ["2025-01-02", "A", "X", "second", "1", "ea", "1", "1"],
        ["2025-01-01", "B", "Y", "first", "1", "ea", "1", "2"],
    ]
    df, _ = normalize_rows(rows)
    assert df["item"].tolist() == ["second", "first"]


def test_empty_records_has_schema_columns():
    df = empty_records()
    assert df.empty
    assert list(df.columns) == RECEIPT_COLUMNS
    assert df["total"].dtype == "float64"


def test_parse_keeps_ragged_rows_and_skips_blank_lines():
    rows = parse_delimited('a,b,c\n\n"x, y",z\n')
    assert rows == [["a", "b", "c"], ["x, y", "z"]]


def test_parse_header_option_drops_first_row():
    rows = parse_delimited("Date,Total\n2025-01-01,3\n", ParseOptions(header=True))
    assert rows == [["2025-01-01", "3"]]


def test_parse_oversized_field_raises_ingest_error():
    import csv

    oversized = "x" * (csv.field_size_limit() + 1)
    with pytest.raises(IngestError, match="malformed CSV"):
        parse_delimited(f"2025-01-01,{oversized}\n")


def test_load_records_report(sample_csv):
    df, report = load_records(sample_csv, "sample")
    assert report.rows_read == 11
    assert report.rows_kept == 9
    assert report.rows_rejected == 2
    assert len(df) == 9
    assert df["total"].notna().all()
