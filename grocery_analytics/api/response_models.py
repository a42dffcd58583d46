"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ViewHealth(BaseModel):
    status: str
    records: int
    source: Optional[str] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    dashboard: ViewHealth
    search: ViewHealth


class PriceRow(BaseModel):
    date: str
    price: float


class HistoryRow(BaseModel):
    date: str
    quantity: float
    total: float


class SearchResponse(BaseModel):
    status: str
    term: Optional[str] = None
    count: int = 0
    total_spent: float = 0.0
    avg_price: float = 0.0
    results: list[dict] = []
    purchase_history: list[HistoryRow] = []
    price_history: list[PriceRow] = []
