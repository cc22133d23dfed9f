# app/services/bk/validation.py
"""Validation and defaulting for BK case records.

``CaseValidator`` turns a create command into an unsaved ORM instance or
raises a ``BKError``. It resolves the student (and, for permits, the
responsible teacher) through ``LookupService`` and never writes anything.

The student's tenancy is checked right after the student id itself, so a
command for another school's student fails with a tenancy error whatever
the rest of the payload looks like.
"""
import logging
from typing import Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.exceptions import missing_field, domain_rule_violation
from ...models.tenant_specific.violation import Violation, ViolationLevel
from ...models.tenant_specific.violation_category import ViolationCategory
from ...models.tenant_specific.achievement import Achievement
from ...models.tenant_specific.permit import Permit
from ...models.tenant_specific.counseling_note import CounselingNote
from ...schemas.bk import (
    ViolationCreate, AchievementCreate, PermitCreate, CounselingNoteCreate,
)
from ..lookup_service import LookupService

logger = logging.getLogger(__name__)

LEVEL_DEFAULT_POINTS = {
    ViolationLevel.LIGHT: -5,
    ViolationLevel.MODERATE: -15,
    ViolationLevel.SEVERE: -30,
}


def require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise missing_field(field)
    return value.strip()


def validate_level(value: Optional[str], field: str = "level") -> ViolationLevel:
    if value is None or not value.strip():
        raise missing_field(field)
    try:
        return ViolationLevel(value.strip().lower())
    except ValueError:
        allowed = ", ".join(level.value for level in ViolationLevel)
        raise domain_rule_violation(f"{field} must be one of: {allowed}", field=field)


def default_point_for_level(level: ViolationLevel) -> int:
    return LEVEL_DEFAULT_POINTS[level]


def resolve_violation_point(
    explicit_point: Optional[int],
    category: Optional[ViolationCategory],
    level: ViolationLevel,
) -> int:
    """First match wins: explicit point, active category default, level default."""
    if explicit_point is not None:
        if explicit_point > 0:
            # Accepted for compatibility with existing clients
            logger.warning(f"Violation recorded with positive explicit point {explicit_point}")
        return explicit_point
    if category is not None and category.is_active:
        return category.default_point
    return default_point_for_level(level)


def validate_category_point(default_point: Optional[int]) -> int:
    if default_point is None:
        raise missing_field("default_point")
    if default_point > 0:
        raise domain_rule_violation("default_point must be zero or negative", field="default_point")
    return default_point


def validate_achievement_point(point: Optional[int]) -> int:
    if point is None:
        raise missing_field("point")
    if point <= 0:
        raise domain_rule_violation("point must be greater than 0", field="point")
    return point


class CaseValidator:
    def __init__(self, db: AsyncSession, lookups: Optional[LookupService] = None):
        self.db = db
        self.lookups = lookups or LookupService(db)

    async def _student_in_school(self, student_id: Optional[UUID], school_id: UUID):
        if student_id is None:
            raise missing_field("student_id")
        return await self.lookups.ensure_student_in_school(student_id, school_id)

    async def find_category(self, category_id: Optional[UUID], school_id: UUID) -> Optional[ViolationCategory]:
        """A category of another school is treated as not resolving"""
        if category_id is None:
            return None
        stmt = select(ViolationCategory).where(
            ViolationCategory.id == category_id,
            ViolationCategory.school_id == school_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def build_violation(self, school_id: UUID, created_by: UUID, data: ViolationCreate) -> Violation:
        await self._student_in_school(data.student_id, school_id)

        category = await self.find_category(data.category_id, school_id)
        category_name = data.category
        if (category_name is None or not category_name.strip()) and category is not None:
            category_name = category.name
        category_name = require_text(category_name, "category")

        level = validate_level(data.level)
        description = require_text(data.description, "description")

        return Violation(
            student_id=data.student_id,
            category_id=category.id if category is not None else None,
            category=category_name,
            level=level.value,
            point=resolve_violation_point(data.point, category, level),
            description=description,
            created_by=created_by,
        )

    async def build_achievement(self, school_id: UUID, created_by: UUID, data: AchievementCreate) -> Achievement:
        await self._student_in_school(data.student_id, school_id)

        title = require_text(data.title, "title")
        point = validate_achievement_point(data.point)

        return Achievement(
            student_id=data.student_id,
            title=title,
            point=point,
            description=(data.description or "").strip() or None,
            created_by=created_by,
        )

    async def build_permit(self, school_id: UUID, created_by: UUID, data: PermitCreate) -> Permit:
        await self._student_in_school(data.student_id, school_id)

        reason = require_text(data.reason, "reason")
        if data.exit_time is None:
            raise missing_field("exit_time")
        if data.responsible_teacher_id is None:
            raise missing_field("responsible_teacher_id")
        await self.lookups.ensure_teacher_in_school(data.responsible_teacher_id, school_id)

        return Permit(
            student_id=data.student_id,
            reason=reason,
            exit_time=data.exit_time,
            responsible_teacher_id=data.responsible_teacher_id,
            created_by=created_by,
        )

    async def build_counseling_note(self, school_id: UUID, created_by: UUID, data: CounselingNoteCreate) -> CounselingNote:
        await self._student_in_school(data.student_id, school_id)

        internal_note = require_text(data.internal_note, "internal_note")

        return CounselingNote(
            student_id=data.student_id,
            internal_note=internal_note,
            parent_summary=(data.parent_summary or "").strip() or None,
            created_by=created_by,
        )
