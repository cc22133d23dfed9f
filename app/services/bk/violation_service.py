# app/services/bk/violation_service.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from ...models.tenant_specific.violation import Violation
from ...schemas.bk import ViolationCreate, ViolationFilter
from ...utils.search import sanitize_search_term
from .record_service import CaseRecordService
from .validation import CaseValidator, validate_level
from .points_cache import invalidate_points, VIOLATION

logger = logging.getLogger(__name__)


class ViolationService(CaseRecordService[Violation]):
    resource = "violation"

    def __init__(self, db: AsyncSession):
        super().__init__(Violation, db)
        self.validator = CaseValidator(db)

    def apply_filters(self, stmt, filters: ViolationFilter):
        stmt = super().apply_filters(stmt, filters)
        if filters.level:
            stmt = stmt.where(Violation.level == validate_level(filters.level).value)
        if filters.category:
            term = sanitize_search_term(filters.category)
            if term:
                stmt = stmt.where(Violation.category.ilike(f"%{term}%", escape="\\"))
        return stmt

    async def create_violation(self, school_id: UUID, created_by: UUID, data: ViolationCreate) -> Violation:
        violation = await self.validator.build_violation(school_id, created_by, data)
        violation = await self.add(violation)
        await invalidate_points(violation.student_id, VIOLATION)
        logger.info(
            f"Violation {violation.id} recorded for student {violation.student_id} "
            f"({violation.level}, {violation.point} points)"
        )
        return violation

    async def get_student_violations(self, student_id: UUID) -> List[Violation]:
        return await self.list_for_student(student_id)

    async def get_student_violation_points(self, student_id: UUID) -> int:
        return await self.sum_points_for_student(student_id)

    async def delete_violation(self, violation_id: UUID, school_id: UUID) -> None:
        violation = await self.delete_in_school(violation_id, school_id)
        await invalidate_points(violation.student_id, VIOLATION)
        logger.info(f"Violation {violation_id} deleted")
