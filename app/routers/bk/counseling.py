# app/routers/bk/counseling.py
"""Counseling notes.

Every read goes through the caller's role: counselors get the full note,
everyone else the restricted view without ``internal_note``.
"""
from datetime import date
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext, get_caller
from ...core.database import get_db
from ...schemas.bk import (
    CounselingNoteCreate, CounselingNoteUpdate, CounselingNoteFilter,
    CounselingNoteFullView, CounselingNoteView,
)
from ...schemas.pagination import PaginatedResponse
from ...services.bk import CounselingNoteService
from .deps import build_filter

router = APIRouter(prefix="/api/v1/bk/counseling", tags=["BK - Counseling"])

@router.get("/", response_model=PaginatedResponse[CounselingNoteView])
async def get_counseling_notes(
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
        CounselingNoteFilter,
        student_id=student_id, class_id=class_id,
        start_date=start_date, end_date=end_date, page=page, page_size=page_size,
    )
    service = CounselingNoteService(db)
    return await service.list_notes(caller, filters)

@router.post("/", response_model=CounselingNoteFullView, status_code=201)
async def create_counseling_note(
    note_data: CounselingNoteCreate,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = CounselingNoteService(db)
    return await service.create_note(caller, note_data)

@router.get("/{note_id}", response_model=CounselingNoteView)
async def get_counseling_note(
    note_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = CounselingNoteService(db)
    return await service.get_note(note_id, caller)

@router.put("/{note_id}", response_model=CounselingNoteFullView)
async def update_counseling_note(
    note_id: UUID,
    note_data: CounselingNoteUpdate,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = CounselingNoteService(db)
    return await service.update_note(note_id, caller, note_data)

@router.delete("/{note_id}")
async def delete_counseling_note(
    note_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = CounselingNoteService(db)
    await service.delete_note(note_id, caller)
    return {"success": True, "message": "Counseling note deleted successfully"}
