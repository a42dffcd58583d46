"""
Grocery Analytics — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grocery_analytics.api.dependencies import set_session
from grocery_analytics.api.router_dashboard import router as dashboard_router
from grocery_analytics.api.router_meta import router as meta_router
from grocery_analytics.api.router_search import router as search_router
from grocery_analytics.logging_setup import configure_logging, get_logger
from grocery_analytics.state import DashboardStatus, ViewSession

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the default dataset at startup."""
    from grocery_analytics.config import DEFAULT_DATASET, REPORTS_FOLDER
    configure_logging()
    REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)

    session = ViewSession().load_default(DEFAULT_DATASET)
    set_session(session)

    stats = (session.dashboard.summary or {}).get("stats")
    if session.dashboard.status == DashboardStatus.READY and stats:
        logger.info("Grocery Analytics ready — %d items, %d trips, $%.2f spent",
                    stats["total_items"], stats["total_trips"], stats["total_spent"])
    else:
        logger.info("Grocery Analytics ready — no data yet. Upload a receipt CSV.")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Grocery Analytics API",
        description="Grocery receipt spending dashboard and item search",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(dashboard_router)
    app.include_router(search_router)
    return app


app = create_app()
