# app/routers/bk/categories.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext, get_caller, get_bk_writer
from ...core.database import get_db
from ...schemas.bk import (
    ViolationCategoryCreate, ViolationCategoryUpdate, ViolationCategoryResponse,
)
from ...services.bk import ViolationCategoryService

router = APIRouter(prefix="/api/v1/bk/violation-categories", tags=["BK - Violation Categories"])

@router.get("/", response_model=List[ViolationCategoryResponse])
async def get_categories(
    active_only: bool = Query(False),
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = ViolationCategoryService(db)
    return await service.get_categories(caller.school_id, active_only=active_only)

@router.post("/", response_model=ViolationCategoryResponse, status_code=201)
async def create_category(
    category_data: ViolationCategoryCreate,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = ViolationCategoryService(db)
    return await service.create_category(caller.school_id, category_data)

@router.post("/initialize")
async def initialize_default_categories(
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    """Seed the default category set; does nothing if the school already has categories"""
    service = ViolationCategoryService(db)
    created = await service.initialize_default_categories(caller.school_id)
    return {"success": True, "created": created}

@router.get("/{category_id}", response_model=ViolationCategoryResponse)
async def get_category(
    category_id: UUID,
    caller: CallerContext = Depends(get_caller),
    db: AsyncSession = Depends(get_db)
):
    service = ViolationCategoryService(db)
    return await service.get_category(category_id, caller.school_id)

@router.put("/{category_id}", response_model=ViolationCategoryResponse)
async def update_category(
    category_id: UUID,
    category_data: ViolationCategoryUpdate,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = ViolationCategoryService(db)
    return await service.update_category(category_id, caller.school_id, category_data)

@router.delete("/{category_id}")
async def delete_category(
    category_id: UUID,
    caller: CallerContext = Depends(get_bk_writer),
    db: AsyncSession = Depends(get_db)
):
    service = ViolationCategoryService(db)
    await service.delete_category(category_id, caller.school_id)
    return {"success": True, "message": "Violation category deleted successfully"}
