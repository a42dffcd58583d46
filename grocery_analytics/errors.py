"""
Ingest failures surfaced to the view layer.
"""
from __future__ import annotations


class IngestError(Exception):
    """Receipt data could not be read, decoded, or parsed.

    Row-level schema mismatches are not errors: those rows are dropped by
    the normalizer and only counted.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{self.source}: {msg}" if self.source else msg
