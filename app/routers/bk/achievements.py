# app/routers/bk/achievements.py
from datetime import date
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext, get_caller, get_bk_writer
from ...core.database import get_db
from ...schemas.bk import (
    AchievementCreate, AchievementResponse, AchievementFilter, AchievementPointsResponse,
)
from ...schemas.pagination import PaginatedResponse
from ...services.bk import AchievementService, ScoringService
from .deps import build_filter

router = APIRouter(prefix="/api/v1/bk/achievements", tags=["BK - Achievements"])

@router.get("/", response_model=PaginatedResponse[AchievementResponse])
async def get_achievements(
    student_id: Optional[UUID] = Query(None),
    class_id: Optional[UUID] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1),
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    filters = build_filter(
        AchievementFilter,
        student_id=student_id, class_id=class_id,
        start_date=start_date, end_date=end_date, page=page, page_size=page_size,
    )
    service = AchievementService(db)
    result = await service.list_paginated(caller.school_id, filters)
    return PaginatedResponse.from_page(result, AchievementResponse.from_record)

@router.post("/", response_model=AchievementResponse, status_code=201)
async def create_achievement(
    achievement_data: AchievementCreate,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = AchievementService(db)
    achievement = await service.create_achievement(caller.school_id, caller.user_id, achievement_data)
    return AchievementResponse.from_record(achievement)

@router.get("/student/{student_id}/points", response_model=AchievementPointsResponse)
async def get_student_achievement_points(
    student_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    """Total achievement points of a student"""
    service = ScoringService(db)
    return await service.achievement_points(student_id, caller.school_id)

@router.get("/{achievement_id}", response_model=AchievementResponse)
async def get_achievement(
    achievement_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = AchievementService(db)
    achievement = await service.get_in_school(achievement_id, caller.school_id)
    return AchievementResponse.from_record(achievement)

@router.delete("/{achievement_id}")
async def delete_achievement(
    achievement_id: UUID,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = AchievementService(db)
    await service.delete_achievement(achievement_id, caller.school_id)
    return {"success": True, "message": "Achievement deleted successfully"}
