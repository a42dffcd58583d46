"""Shared fixtures: sample receipt CSVs and their normalized records."""

from __future__ import annotations

import textwrap

import pytest

from grocery_analytics.data import load_records


def _dedent(s: str) -> str:
    return textwrap.dedent(s).lstrip("\n")


SAMPLE_CSV = _dedent(
    """
    2025-01-05,Safeway,Dairy,Whole Milk,1,gal,3.50,3.50
    2025-01-05,Safeway,CRV,CRV,1,ea,0.10,0.10
    2025-01-05,Safeway,Bakery,Sourdough Bread,1,ea,5.00,5.00
    2025-01-06,Trader Joe's,Dairy,Almond Milk,2,qt,2.00,4.00
    2025-01-06,Trader Joe's,Produce,Bananas,6,ea,0.25,1.50
    2025-02-02,Safeway,Dairy,Whole Milk,1,gal,3.75,3.75
    2025-02-02,Safeway,CRV,CRV,2,ea,0.05,0.10
    2025-02-10,Costco,Pantry,Peanut Butter,1,jar,8.99,8.99

    2025-02-10,Costco,Produce,Bananas,,bunch,,2.10
    2025-02-11,Costco,Pantry
    2025-02-11,Costco,Pantry,Olive Oil,1,btl,9.99,N/A
    """
)


@pytest.fixture()
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def records(sample_csv):
    df, _ = load_records(sample_csv, "sample")
    return df


@pytest.fixture()
def sample_file(tmp_path, sample_csv):
    path = tmp_path / "combined_grocery_data.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path
