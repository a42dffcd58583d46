"""
Receipt CSV reading: file/upload bytes → text → normalized records.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from grocery_analytics.config import DEFAULT_DATASET
from grocery_analytics.data.normalize import normalize_rows
from grocery_analytics.data.parser import parse_delimited
from grocery_analytics.data.schemas import NormalizeReport, ParseOptions
from grocery_analytics.errors import IngestError
from grocery_analytics.logging_setup import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Raw text
# ---------------------------------------------------------------------------

def decode_upload(content: bytes, source: str | None = None) -> str:
    """Decode uploaded bytes as UTF-8 (a leading BOM is dropped)."""
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise IngestError(f"not UTF-8 text ({exc.reason} at byte {exc.start})", source) from exc


def read_csv_text(filepath: Path) -> str:
    """Read a receipt CSV from disk."""
    try:
        content = Path(filepath).read_bytes()
    except OSError as exc:
        raise IngestError(exc.strerror or str(exc), str(filepath)) from exc
    return decode_upload(content, str(filepath))


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def load_records(
    text: str,
    source: str | None = None,
    options: ParseOptions | None = None,
) -> tuple[pd.DataFrame, NormalizeReport]:
    """Parse and normalize receipt text in one pass."""
    try:
        rows = parse_delimited(text, options)
    except IngestError as exc:
        exc.source = exc.source or source
        raise
    df, report = normalize_rows(rows)
    logger.info("Loaded %s: %d records from %d rows",
                source or "receipt data", report.rows_kept, report.rows_read)
    return df, report


def load_default_dataset(path: Path | None = None) -> str | None:
    """Text of the startup dataset, or None when it is missing or unreadable."""
    path = Path(path or DEFAULT_DATASET)
    if not path.exists():
        logger.warning("Default dataset not found at %s; views start empty", path)
        return None
    try:
        return read_csv_text(path)
    except IngestError as exc:
        logger.error("Error loading default dataset: %s", exc)
        return None
