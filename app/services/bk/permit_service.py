# app/services/bk/permit_service.py
"""Exit permits and their two-state lifecycle.

A permit is Open while ``return_time`` is empty and Returned once it is
set. ``record_return`` is the only transition and it is one-way.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import missing_field, conflict
from ...models.tenant_specific.permit import Permit
from ...schemas.bk import PermitCreate, PermitFilter, PermitDocumentResponse
from .record_service import CaseRecordService
from .validation import CaseValidator

logger = logging.getLogger(__name__)


class PermitService(CaseRecordService[Permit]):
    resource = "permit"

    def __init__(self, db: AsyncSession):
        super().__init__(Permit, db)
        self.validator = CaseValidator(db)

    @property
    def date_column(self):
        return Permit.exit_time

    def ordering(self) -> tuple:
        return (Permit.exit_time.desc(), Permit.created_at.desc())

    def apply_filters(self, stmt, filters: PermitFilter):
        stmt = super().apply_filters(stmt, filters)
        if filters.teacher_id:
            stmt = stmt.where(Permit.responsible_teacher_id == filters.teacher_id)
        if filters.has_returned is True:
            stmt = stmt.where(Permit.return_time.is_not(None))
        elif filters.has_returned is False:
            stmt = stmt.where(Permit.return_time.is_(None))
        return stmt

    async def create_permit(self, school_id: UUID, created_by: UUID, data: PermitCreate) -> Permit:
        permit = await self.validator.build_permit(school_id, created_by, data)
        permit = await self.add(permit)
        logger.info(f"Permit {permit.id} issued for student {permit.student_id}")
        return permit

    async def record_return(self, permit_id: UUID, school_id: UUID, return_time: Optional[datetime]) -> Permit:
        """Open -> Returned. No ordering check against exit_time."""
        if return_time is None:
            raise missing_field("return_time")

        permit = await self.get_in_school(permit_id, school_id)
        if permit.has_returned:
            raise conflict("PERMIT_ALREADY_RETURNED", "Student has already returned")

        permit = await self.update(permit, {"return_time": return_time})
        logger.info(f"Permit {permit_id} closed, student returned at {return_time.isoformat()}")
        return permit

    async def attach_document(self, permit_id: UUID, school_id: UUID, document_url: str) -> Permit:
        """Store the URL produced by the external export step"""
        permit = await self.get_in_school(permit_id, school_id)
        return await self.update(permit, {"document_url": document_url.strip()})

    async def get_permit_document(self, permit_id: UUID, school_id: UUID) -> PermitDocumentResponse:
        permit = await self.get_in_school(permit_id, school_id)
        student = permit.student
        return PermitDocumentResponse(
            permit_id=permit.id,
            student_name=student.name,
            student_nis=student.nis or "",
            student_nisn=student.nisn or "",
            class_name=student.class_name,
            school_name=student.tenant.school_name if student.tenant is not None else "",
            reason=permit.reason,
            exit_time=permit.exit_time,
            responsible_teacher=permit.teacher.display_name if permit.teacher is not None else "",
            generated_at=datetime.now(timezone.utc),
        )

    async def get_student_permits(self, student_id: UUID) -> List[Permit]:
        return await self.list_for_student(student_id)

    async def count_open_permits(self, school_id: UUID) -> int:
        return await self.count_in_school(school_id, Permit.return_time.is_(None))

    async def delete_permit(self, permit_id: UUID, school_id: UUID) -> None:
        await self.delete_in_school(permit_id, school_id)
        logger.info(f"Permit {permit_id} deleted")
