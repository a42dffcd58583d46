"""
Delimited-text parsing: raw receipt text → ragged rows of string tokens.
"""
from __future__ import annotations

import csv
import io

from grocery_analytics.data.schemas import ParseOptions
from grocery_analytics.errors import IngestError


def parse_delimited(text: str, options: ParseOptions | None = None) -> list[list[str]]:
    """Split ``text`` into rows of tokens.

    Rows keep their own length (short rows are not padded) so the
    normalizer can enforce the column-count rule. No type inference happens
    here.
    """
    options = options or ParseOptions()
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=options.delimiter)
    try:
        rows = [row for row in reader if row or not options.skip_empty_lines]
    except csv.Error as exc:
        raise IngestError(f"malformed CSV near line {reader.line_num}: {exc}") from exc

    if options.header and rows:
        rows = rows[1:]
    return rows
