# app/routers/bk/students.py
"""Per-student BK views: profile, point totals and record histories."""
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext, get_caller
from ...core.database import get_db
from ...schemas.bk import (
    ViolationResponse, AchievementResponse, PermitResponse, CounselingNoteView,
    StudentBKProfile, StudentPointsResponse,
)
from ...services.lookup_service import LookupService
from ...services.bk import (
    ViolationService, AchievementService, PermitService, CounselingNoteService, ScoringService,
)

router = APIRouter(prefix="/api/v1/bk/students", tags=["BK - Students"])


async def _ensure_student(db: AsyncSession, student_id: UUID, caller: CallerContext) -> None:
    await LookupService(db).ensure_student_in_school(student_id, caller.school_id)

@router.get("/{student_id}/profile", response_model=StudentBKProfile)
async def get_student_profile(
    student_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    """Counts, point totals and the most recent records of a student"""
    service = ScoringService(db)
    return await service.student_profile(student_id, caller)

@router.get("/{student_id}/points", response_model=StudentPointsResponse)
async def get_student_points(
    student_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = ScoringService(db)
    return await service.student_points(student_id, caller.school_id)

@router.get("/{student_id}/violations", response_model=List[ViolationResponse])
async def get_student_violations(
    student_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    await _ensure_student(db, student_id, caller)
    violations = await ViolationService(db).get_student_violations(student_id)
    return [ViolationResponse.from_record(v) for v in violations]

@router.get("/{student_id}/achievements", response_model=List[AchievementResponse])
async def get_student_achievements(
    student_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    await _ensure_student(db, student_id, caller)
    achievements = await AchievementService(db).get_student_achievements(student_id)
    return [AchievementResponse.from_record(a) for a in achievements]

@router.get("/{student_id}/permits", response_model=List[PermitResponse])
async def get_student_permits(
    student_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    await _ensure_student(db, student_id, caller)
    permits = await PermitService(db).get_student_permits(student_id)
    return [PermitResponse.from_record(p) for p in permits]

@router.get("/{student_id}/counseling", response_model=List[CounselingNoteView])
async def get_student_counseling_notes(
    student_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    await _ensure_student(db, student_id, caller)
    return await CounselingNoteService(db).get_student_notes(student_id, caller)
