"""
Dashboard endpoints — spending summary, CSV upload, reload, Excel export.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, JSONResponse

from grocery_analytics.api.dependencies import get_session
from grocery_analytics.reports import spending_report
from grocery_analytics.state import DashboardState, ViewSession

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _safe_json(state: DashboardState) -> JSONResponse:
    return JSONResponse(content=spending_report.generate_json(state))


@router.get("")
def dashboard(session: ViewSession = Depends(get_session)):
    """Category, store, monthly, top-item and trip summaries."""
    return _safe_json(session.dashboard)


@router.post("/upload")
async def upload_csv(file: UploadFile = File(...), session: ViewSession = Depends(get_session)):
    """Replace the dashboard data with an uploaded receipt CSV."""
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(400, f"Only .csv files are accepted (got '{file.filename}')")

    content = await file.read()
    # parsing and aggregation are blocking pandas work
    after = await run_in_threadpool(session.upload, content, file.filename)
    if after.error:
        raise HTTPException(400, after.error)
    return _safe_json(after)


@router.post("/reload")
def reload_default(session: ViewSession = Depends(get_session)):
    """Re-read the default dataset into the dashboard only."""
    from grocery_analytics.config import DEFAULT_DATASET
    return _safe_json(session.reload_dashboard(DEFAULT_DATASET))


@router.get("/excel")
def dashboard_excel(session: ViewSession = Depends(get_session)):
    """Dashboard aggregates as an Excel download."""
    from grocery_analytics.config import REPORTS_FOLDER
    out_path = REPORTS_FOLDER / "Grocery_Spending_Report.xlsx"
    try:
        spending_report.generate_excel(session.dashboard, out_path)
    except ValueError as e:
        raise HTTPException(404, str(e))
    return FileResponse(
        path=str(out_path),
        filename=out_path.name,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
