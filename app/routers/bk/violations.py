# app/routers/bk/violations.py
from datetime import date
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext, get_caller, get_bk_writer
from ...core.database import get_db
from ...schemas.bk import ViolationCreate, ViolationResponse, ViolationFilter
from ...schemas.pagination import PaginatedResponse
from ...services.bk import ViolationService
from .deps import build_filter

router = APIRouter(prefix="/api/v1/bk/violations", tags=["BK - Violations"])

@router.get("/", response_model=PaginatedResponse[ViolationResponse])
async def get_violations(
    student_id: Optional[UUID] = Query(None),
    class_id: Optional[UUID] = Query(None),
    level: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1),
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    """Get paginated violations of the caller's school"""
    filters = build_filter(
        ViolationFilter,
        student_id=student_id, class_id=class_id, level=level, category=category,
        start_date=start_date, end_date=end_date, page=page, page_size=page_size,
    )
    service = ViolationService(db)
    result = await service.list_paginated(caller.school_id, filters)
    return PaginatedResponse.from_page(result, ViolationResponse.from_record)

@router.post("/", response_model=ViolationResponse, status_code=201)
async def create_violation(
    violation_data: ViolationCreate,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    """Record a violation"""
    service = ViolationService(db)
    violation = await service.create_violation(caller.school_id, caller.user_id, violation_data)
    return ViolationResponse.from_record(violation)

@router.get("/{violation_id}", response_model=ViolationResponse)
async def get_violation(
    violation_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = ViolationService(db)
    violation = await service.get_in_school(violation_id, caller.school_id)
    return ViolationResponse.from_record(violation)

@router.delete("/{violation_id}")
async def delete_violation(
    violation_id: UUID,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = ViolationService(db)
    await service.delete_violation(violation_id, caller.school_id)
    return {"success": True, "message": "Violation deleted successfully"}
