# app/routers/bk/dashboard.py
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext, get_caller
from ...core.database import get_db
from ...schemas.bk import BKDashboardResponse
from ...services.bk import ScoringService

router = APIRouter(prefix="/api/v1/bk/dashboard", tags=["BK - Dashboard"])

@router.get("/", response_model=BKDashboardResponse)
async def get_dashboard(
    limit: Optional[int] = Query(None, ge=1, description="Size of the needs-attention list"),
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    """School-wide BK totals, recent records and students needing attention"""
    service = ScoringService(db)
    return await service.dashboard(caller.school_id, limit)
