# app/routers/bk/permits.py
from datetime import date
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext, get_caller, get_bk_writer
from ...core.database import get_db
from ...schemas.bk import (
    PermitCreate, PermitResponse, PermitFilter, RecordReturnRequest,
    PermitDocumentAttach, PermitDocumentResponse,
)
from ...schemas.pagination import PaginatedResponse
from ...services.bk import PermitService
from .deps import build_filter

router = APIRouter(prefix="/api/v1/bk/permits", tags=["BK - Permits"])

@router.get("/", response_model=PaginatedResponse[PermitResponse])
async def get_permits(
    student_id: Optional[UUID] = Query(None),
    class_id: Optional[UUID] = Query(None),
    teacher_id: Optional[UUID] = Query(None),
    has_returned: Optional[bool] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1),
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    """Permits of the school, most recent exit first"""
    filters = build_filter(
        PermitFilter,
        student_id=student_id, class_id=class_id, teacher_id=teacher_id, has_returned=has_returned,
        start_date=start_date, end_date=end_date, page=page, page_size=page_size,
    )
    service = PermitService(db)
    result = await service.list_paginated(caller.school_id, filters)
    return PaginatedResponse.from_page(result, PermitResponse.from_record)

@router.post("/", response_model=PermitResponse, status_code=201)
async def create_permit(
    permit_data: PermitCreate,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = PermitService(db)
    permit = await service.create_permit(caller.school_id, caller.user_id, permit_data)
    return PermitResponse.from_record(permit)

@router.get("/{permit_id}", response_model=PermitResponse)
async def get_permit(
    permit_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = PermitService(db)
    permit = await service.get_in_school(permit_id, caller.school_id)
    return PermitResponse.from_record(permit)

@router.post("/{permit_id}/return", response_model=PermitResponse)
async def record_return(
    permit_id: UUID,
    return_data: RecordReturnRequest,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    """Mark the student as back; a permit can only be closed once"""
    service = PermitService(db)
    permit = await service.record_return(permit_id, caller.school_id, return_data.return_time)
    return PermitResponse.from_record(permit)

@router.get("/{permit_id}/document", response_model=PermitDocumentResponse)
async def get_permit_document(
    permit_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = PermitService(db)
    return await service.get_permit_document(permit_id, caller.school_id)

@router.put("/{permit_id}/document", response_model=PermitResponse)
async def attach_permit_document(
    permit_id: UUID,
    document_data: PermitDocumentAttach,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = PermitService(db)
    permit = await service.attach_document(permit_id, caller.school_id, document_data.document_url)
    return PermitResponse.from_record(permit)

@router.delete("/{permit_id}")
async def delete_permit(
    permit_id: UUID,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = PermitService(db)
    await service.delete_permit(permit_id, caller.school_id)
    return {"success": True, "message": "Permit deleted successfully"}
