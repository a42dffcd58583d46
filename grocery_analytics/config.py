"""
Grocery Analytics — Configuration: paths, constants, receipt schema.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with GROCERY_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("GROCERY_DATA_DIR", str(Path.home() / "Desktop" / "Grocery Analytics")))
BASE_FOLDER = _data_dir
REPORTS_FOLDER = _data_dir / "reports"
DEFAULT_DATASET = Path(os.environ.get("GROCERY_DEFAULT_CSV", str(_data_dir / "combined_grocery_data.csv")))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("GROCERY_LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# Receipt CSV layout (headerless, positional)
# ---------------------------------------------------------------------------
CSV_DELIMITER = ","

# (column, kind, required); kind is "text" or "number". A row missing a
# required value is dropped.
RECEIPT_SCHEMA = [
    ("date", "text", False),
    ("store", "text", False),
    ("category", "text", False),
    ("item", "text", False),
    ("quantity", "number", False),
    ("unit", "text", False),
    ("price", "number", False),
    ("total", "number", True),
]
RECEIPT_COLUMNS = [name for name, _, _ in RECEIPT_SCHEMA]
REQUIRED_COLUMN_COUNT = len(RECEIPT_SCHEMA)

# ---------------------------------------------------------------------------
# Aggregation rules
# ---------------------------------------------------------------------------
# Container redemption value: deposit lines, counted in overall and store
# totals but left out of category and item breakdowns.
CRV_CATEGORY = "CRV"
TOP_ITEMS_LIMIT = 10
MONTH_KEY_LENGTH = 7  # "YYYY-MM"
