# app/services/bk/record_service.py
"""Tenant-scoped storage operations shared by every BK record kind."""
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, List, Optional, Type, TypeVar
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import not_found
from ...models.tenant_specific.student import Student
from ...schemas.bk.common import RecordFilter
from ...utils.pagination import Paginator
from ..base_service import BaseService

T = TypeVar('T')


def day_bounds(start_date: Optional[date], end_date: Optional[date]):
    """[start 00:00, day after end 00:00) in UTC; either side may be open"""
    lower = datetime.combine(start_date, time.min, tzinfo=timezone.utc) if start_date else None
    upper = (
        datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
        if end_date else None
    )
    return lower, upper


class CaseRecordService(BaseService[T]):
    """Every case record belongs to a student; its tenant is the student's."""

    resource = "record"

    def __init__(self, model: Type[T], db: AsyncSession):
        super().__init__(model, db)

    @property
    def date_column(self):
        return self.model.created_at

    def recency(self) -> tuple:
        """Newest first by creation time"""
        return (self.model.created_at.desc(), self.model.id.desc())

    def ordering(self) -> tuple:
        """Ordering of paginated listings"""
        return self.recency()

    def scoped(self, school_id: UUID):
        return (
            select(self.model)
            .join(Student, Student.id == self.model.student_id)
            .where(Student.tenant_id == school_id)
        )

    def apply_filters(self, stmt, filters: RecordFilter):
        if filters.student_id:
            stmt = stmt.where(self.model.student_id == filters.student_id)
        if filters.class_id:
            stmt = stmt.where(Student.class_id == filters.class_id)
        lower, upper = day_bounds(filters.start_date, filters.end_date)
        if lower is not None:
            stmt = stmt.where(self.date_column >= lower)
        if upper is not None:
            stmt = stmt.where(self.date_column < upper)
        return stmt

    async def get_in_school(self, id: UUID, school_id: UUID, reload: bool = False) -> T:
        stmt = self.scoped(school_id).where(self.model.id == id)
        if reload:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        record = result.scalar_one_or_none()
        if not record:
            raise not_found(self.resource)
        return record

    async def list_paginated(self, school_id: UUID, filters: RecordFilter) -> dict:
        page, page_size = Paginator.normalize(filters.page, filters.page_size)
        stmt = self.apply_filters(self.scoped(school_id), filters)

        total = await self.count(stmt)

        stmt = stmt.order_by(*self.ordering())
        stmt = stmt.offset(Paginator.calculate_offset(page, page_size)).limit(page_size)
        result = await self.db.execute(stmt)
        items = result.scalars().all()

        return Paginator.create_response(list(items), page, page_size, total)

    async def list_for_student(self, student_id: UUID, limit: Optional[int] = None) -> List[T]:
        """Newest first"""
        stmt = select(self.model).where(self.model.student_id == student_id).order_by(*self.recency())
        if limit:
            stmt = stmt.limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def recent_in_school(self, school_id: UUID, limit: int) -> List[T]:
        stmt = self.scoped(school_id).order_by(*self.recency()).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_for_student(self, student_id: UUID) -> int:
        stmt = select(func.count(self.model.id)).where(self.model.student_id == student_id)
        return await self.scalar(stmt) or 0

    async def count_in_school(self, school_id: UUID, *conditions: Any) -> int:
        stmt = (
            select(func.count(self.model.id))
            .join(Student, Student.id == self.model.student_id)
            .where(Student.tenant_id == school_id, *conditions)
        )
        return await self.scalar(stmt) or 0

    async def sum_points_for_student(self, student_id: UUID) -> int:
        stmt = select(func.coalesce(func.sum(self.model.point), 0)).where(self.model.student_id == student_id)
        return int(await self.scalar(stmt) or 0)

    async def delete_in_school(self, id: UUID, school_id: UUID) -> T:
        record = await self.get_in_school(id, school_id)
        await self.hard_delete(record)
        return record
