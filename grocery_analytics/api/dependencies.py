"""
FastAPI dependencies — ViewSession singleton.
"""
from __future__ import annotations

from fastapi import HTTPException

from grocery_analytics.state import ViewSession

# ---------------------------------------------------------------------------
# Global session singleton (set during startup)
# ---------------------------------------------------------------------------
_session: ViewSession | None = None


def set_session(session: ViewSession) -> None:
    global _session
    _session = session


def get_session() -> ViewSession:
    if _session is None:
        raise HTTPException(503, "Server not initialized yet")
    return _session
