"""
Parse options and ingest bookkeeping for receipt CSVs.
"""
from __future__ import annotations

from dataclasses import dataclass

from grocery_analytics.config import CSV_DELIMITER


@dataclass(frozen=True)
class ParseOptions:
    """How raw receipt text is split into rows."""
    delimiter: str = CSV_DELIMITER
    header: bool = False            # receipt exports carry no header row
    skip_empty_lines: bool = True


@dataclass(frozen=True)
class NormalizeReport:
    """Row counts from one normalization pass."""
    rows_read: int = 0
    rows_kept: int = 0

    @property
    def rows_rejected(self) -> int:
        return self.rows_read - self.rows_kept

    def to_dict(self) -> dict:
        return {
            "rows_read": self.rows_read,
            "rows_kept": self.rows_kept,
            "rows_rejected": self.rows_rejected,
        }
