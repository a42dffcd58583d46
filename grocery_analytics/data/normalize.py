"""
Positional row → receipt record mapping, typed per the receipt schema.
"""
from __future__ import annotations

import math
import re
from typing import Sequence

import pandas as pd

from grocery_analytics.config import RECEIPT_COLUMNS, RECEIPT_SCHEMA, REQUIRED_COLUMN_COUNT
from grocery_analytics.data.schemas import NormalizeReport
from grocery_analytics.logging_setup import get_logger

logger = get_logger(__name__)

# Plain decimal or scientific notation; no currency symbols or thousands separators.
_NUMBER_RE = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")

_REQUIRED_NUMBERS = [i for i, (_, kind, required) in enumerate(RECEIPT_SCHEMA) if required and kind == "number"]
_NUMBER_COLUMNS = [name for name, kind, _ in RECEIPT_SCHEMA if kind == "number"]


# ---------------------------------------------------------------------------
# Scalar conversion
# ---------------------------------------------------------------------------

def coerce_number(value) -> float | None:
    """Return ``value`` as a finite float, or None if it is not a number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str) and _NUMBER_RE.match(value):
        number = float(value)
        return number if math.isfinite(number) else None
    return None


# ---------------------------------------------------------------------------
# Row acceptance
# ---------------------------------------------------------------------------

def is_valid_row(row: Sequence) -> bool:
    """A row is kept iff it has all 8 columns and a numeric Total."""
    if len(row) < REQUIRED_COLUMN_COUNT:
        return False
    return all(coerce_number(row[i]) is not None for i in _REQUIRED_NUMBERS)


# ---------------------------------------------------------------------------
# Frame construction
# ---------------------------------------------------------------------------

def empty_records() -> pd.DataFrame:
    """A zero-row records frame with the receipt columns and dtypes."""
    df, _ = normalize_rows([])
    return df


def normalize_rows(rows: Sequence[Sequence]) -> tuple[pd.DataFrame, NormalizeReport]:
    """Map raw rows onto the receipt schema, dropping invalid rows.

    Extra trailing columns are ignored. Non-numeric Quantity or Price values
    become missing but the row is kept. Input order is preserved.
    """
    kept = [list(row[:REQUIRED_COLUMN_COUNT]) for row in rows if is_valid_row(row)]
    df = pd.DataFrame(kept, columns=RECEIPT_COLUMNS)

    for col in _NUMBER_COLUMNS:
        df[col] = df[col].map(coerce_number).astype("float64")

    report = NormalizeReport(rows_read=len(rows), rows_kept=len(df))
    if report.rows_rejected:
        logger.info("Dropped %d of %d rows (short row or non-numeric total)",
                    report.rows_rejected, report.rows_read)
    return df, report
