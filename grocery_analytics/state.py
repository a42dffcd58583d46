"""
View state — immutable snapshots for the dashboard and search views.

Each transition function takes a snapshot and returns a new one; nothing is
modified in place. ``ViewSession`` holds the current snapshot of each view
and swaps it on every transition, so readers always see a complete state.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

import pandas as pd

from grocery_analytics.analytics.dashboard import build_dashboard
from grocery_analytics.analytics.search import search_items
from grocery_analytics.data.loader import decode_upload, load_default_dataset, load_records, read_csv_text
from grocery_analytics.data.normalize import empty_records
from grocery_analytics.data.schemas import NormalizeReport
from grocery_analytics.errors import IngestError
from grocery_analytics.logging_setup import get_logger

logger = get_logger(__name__)


class DashboardStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


class SearchStatus(str, Enum):
    IDLE = "idle"
    WITH_RESULTS = "with_results"
    NO_RESULTS = "no_results"


# ---------------------------------------------------------------------------
# Dashboard view
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class DashboardState:
    status: DashboardStatus = DashboardStatus.IDLE
    records: pd.DataFrame = field(default_factory=empty_records)
    summary: dict | None = None
    source: str | None = None
    report: NormalizeReport | None = None
    error: str | None = None      # last ingest failure, cleared on success


def start_loading(state: DashboardState) -> DashboardState:
    return replace(state, status=DashboardStatus.LOADING)


def _settled(state: DashboardState) -> DashboardStatus:
    """Status to fall back to when a load fails."""
    return DashboardStatus.READY if state.summary is not None else DashboardStatus.IDLE


def ingest(state: DashboardState, text: str, source: str | None = None) -> DashboardState:
    """Replace the dashboard with aggregates of ``text``.

    On a parse failure the prior snapshot is kept (error recorded).
    """
    try:
        records, report = load_records(text, source)
    except IngestError as exc:
        logger.error("Error processing %s: %s", source or "receipt data", exc)
        return replace(state, status=_settled(state), error=str(exc))

    return DashboardState(
        status=DashboardStatus.READY,
        records=records,
        summary=build_dashboard(records),
        source=source,
        report=report,
    )


def ingest_bytes(state: DashboardState, content: bytes, source: str | None = None) -> DashboardState:
    try:
        text = decode_upload(content, source)
    except IngestError as exc:
        logger.error("Error reading %s: %s", source or "upload", exc)
        return replace(state, status=_settled(state), error=str(exc))
    return ingest(state, text, source)


def ingest_path(state: DashboardState, path: Path) -> DashboardState:
    try:
        text = read_csv_text(path)
    except IngestError as exc:
        logger.error("Error reading %s: %s", path, exc)
        return replace(state, status=_settled(state), error=str(exc))
    return ingest(state, text, str(path))


# ---------------------------------------------------------------------------
# Search view
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class SearchState:
    status: SearchStatus = SearchStatus.IDLE
    records: pd.DataFrame = field(default_factory=empty_records)
    source: str | None = None
    term: str | None = None
    result: dict | None = None
    error: str | None = None


def load_search_records(state: SearchState, text: str, source: str | None = None) -> SearchState:
    """Give the search view a fresh record set; prior results are discarded."""
    try:
        records, _ = load_records(text, source)
    except IngestError as exc:
        logger.error("Error loading data: %s", exc)
        return replace(state, error=str(exc))
    return SearchState(records=records, source=source)


def search(state: SearchState, term: str | None) -> SearchState:
    """Run a search. A blank term leaves the snapshot untouched."""
    result = search_items(state.records, term)
    if result is None:
        return state
    status = SearchStatus.WITH_RESULTS if result["count"] else SearchStatus.NO_RESULTS
    return replace(state, status=status, term=term, result=result)


# ---------------------------------------------------------------------------
# Session

def _source_name(path: Path | None) -> str:
    return str(path) if path else "default dataset"


class ViewSession:
    """Current dashboard and search snapshots for one running app."""

    def __init__(self) -> None:
        self.dashboard = DashboardState()
        self.search = SearchState()

    def load_default(self, path: Path | None = None) -> "ViewSession":
        """Load the startup dataset into both views (each keeps its own copy)."""
        self.reload_dashboard(path)
        self.reload_search(path)
        return self

    def reload_dashboard(self, path: Path | None = None) -> DashboardState:
        """Re-read the dataset into the dashboard only."""
        self.dashboard = start_loading(self.dashboard)
        text = load_default_dataset(path)
        if text is None:
            self.dashboard = replace(self.dashboard, status=_settled(self.dashboard))
            return self.dashboard
        self.dashboard = ingest(self.dashboard, text, _source_name(path))
        return self.dashboard

    def reload_search(self, path: Path | None = None) -> SearchState:
        """Re-read the dataset into the search view only."""
        text = load_default_dataset(path)
        if text is not None:
            self.search = load_search_records(self.search, text, _source_name(path))
        return self.search

    def upload(self, content: bytes, filename: str | None = None) -> DashboardState:
        self.dashboard = ingest_bytes(start_loading(self.dashboard), content, filename)
        return self.dashboard

    def run_search(self, term: str | None) -> SearchState:
        self.search = search(self.search, term)
        return self.search
