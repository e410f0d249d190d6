from datetime import date
from typing import Optional

from fastapi import APIRouter, Query, Response

from skipsave.api.dependencies import CurrentUserId, DbSession
from skipsave.api.schemas import DashboardOut
from skipsave.services.database.models.base import utcnow
from skipsave.services.database.models.entry.crud import list_entries
from skipsave.services.database.models.preference.crud import get_preferences
from skipsave.services.insights import build_dashboard, daily_series, render_sparkline

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOut)
async def get_dashboard(
    db: DbSession,
    user_id: CurrentUserId,
    as_of: Optional[date] = Query(None, alias="asOf"),
    days: int = Query(30, ge=1, le=366),
):
    """Savings KPIs plus the daily series for the trend chart"""
    entries = await list_entries(db, user_id)
    prefs = await get_preferences(db, user_id)
    return build_dashboard(entries, prefs, as_of or utcnow().date(), days)


@router.get("/sparkline.svg", response_class=Response)
async def get_sparkline(
    db: DbSession,
    user_id: CurrentUserId,
    response: Response,
    as_of: Optional[date] = Query(None, alias="asOf"),
    days: int = Query(30, ge=1, le=366),
    width: int = Query(600, ge=20, le=2000),
    height: int = Query(120, ge=20, le=1000),
):
    entries = await list_entries(db, user_id)
    series = daily_series(entries, as_of or utcnow().date(), days)
    svg = render_sparkline(series, width=width, height=height)
    svg_response = Response(content=svg, media_type="image/svg+xml")
    for cookie in response.headers.getlist("set-cookie"):
        svg_response.headers.append("set-cookie", cookie)
    return svg_response
