"""
Item search endpoints.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from grocery_analytics.analytics.common import sanitize_for_json
from grocery_analytics.api.dependencies import get_session
from grocery_analytics.api.response_models import SearchResponse
from grocery_analytics.state import SearchState, ViewSession

router = APIRouter(prefix="/api/search", tags=["search"])


def _response(state: SearchState) -> SearchResponse:
    result = sanitize_for_json(state.result or {})
    return SearchResponse(status=state.status.value, **result)


@router.get("", response_model=SearchResponse)
def search_items(
    q: Optional[str] = Query(None, description="Case-insensitive item name fragment"),
    session: ViewSession = Depends(get_session),
):
    """Search purchases by item name. A blank query returns the previous result."""
    return _response(session.run_search(q))


@router.post("/reload", response_model=SearchResponse)
def reload_search(session: ViewSession = Depends(get_session)):
    """Re-read the default dataset into the search view only."""
    from grocery_analytics.config import DEFAULT_DATASET
    return _response(session.reload_search(DEFAULT_DATASET))
