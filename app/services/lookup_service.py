# app/services/lookup_service.py
"""Collaborator lookups: students and staff users with their tenant."""
from typing import Optional, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from ..core.exceptions import not_found, tenancy_violation
from ..models.tenant_specific.student import Student
from ..models.user import User


class LookupService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_student_by_id(self, student_id: UUID) -> Tuple[Student, UUID]:
        stmt = select(Student).where(
            Student.id == student_id,
            Student.is_deleted == False
        )
        result = await self.db.execute(stmt)
        student = result.scalar_one_or_none()
        if not student:
            raise not_found("student")
        return student, student.tenant_id

    async def find_user_by_id(self, user_id: UUID, resource: str = "user") -> Tuple[User, Optional[UUID]]:
        stmt = select(User).where(
            User.id == user_id,
            User.is_deleted == False
        )
        result = await self.db.execute(stmt)
        user = result.scalar_one_or_none()
        if not user:
            raise not_found(resource)
        return user, user.tenant_id

    async def ensure_student_in_school(self, student_id: UUID, school_id: UUID) -> Student:
        student, tenant_id = await self.find_student_by_id(student_id)
        if tenant_id != school_id:
            raise tenancy_violation("student")
        return student

    async def ensure_teacher_in_school(self, teacher_id: UUID, school_id: UUID) -> User:
        """Platform-level staff (no tenant) may supervise any school's permits"""
        teacher, tenant_id = await self.find_user_by_id(teacher_id, resource="teacher")
        if tenant_id is not None and tenant_id != school_id:
            raise tenancy_violation("teacher")
        return teacher
