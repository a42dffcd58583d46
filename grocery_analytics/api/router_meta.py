"""
Meta endpoints: health.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from grocery_analytics.api.dependencies import get_session
from grocery_analytics.api.response_models import HealthResponse, ViewHealth
from grocery_analytics.state import ViewSession

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(session: ViewSession = Depends(get_session)):
    dash, srch = session.dashboard, session.search
    return HealthResponse(
        status="ok",
        dashboard=ViewHealth(status=dash.status.value, records=len(dash.records),
                             source=dash.source, error=dash.error),
        search=ViewHealth(status=srch.status.value, records=len(srch.records),
                          source=srch.source, error=srch.error),
    )
