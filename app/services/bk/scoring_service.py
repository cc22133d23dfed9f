# app/services/bk/scoring_service.py
"""Per-student point totals, BK profiles and the school dashboard.

Nothing here is stored: every figure is recomputed from the case records on
each read. Dashboard and profile sub-queries are best effort; a failing
sub-query is logged and replaced by an empty or zero result.
"""
import logging
from typing import Any, Awaitable, Callable, List, Optional
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.cache import cache
from ...core.caller import CallerContext
from ...core.config import settings
from ...models.tenant_specific.class_model import ClassModel
from ...models.tenant_specific.student import Student
from ...models.tenant_specific.violation import Violation
from ...schemas.bk import (
    ViolationResponse, AchievementResponse, PermitResponse,
    StudentPointsResponse, AchievementPointsResponse, StudentBKProfile,
    AttentionItem, BKDashboardResponse,
)
from ..lookup_service import LookupService
from .achievement_service import AchievementService
from .attention import AttentionPolicy, StudentViolationCount, ThresholdAttentionPolicy
from .counseling_service import CounselingNoteService
from .permit_service import PermitService
from .points_cache import points_key, ACHIEVEMENT, VIOLATION
from .projection import project_notes
from .violation_service import ViolationService

logger = logging.getLogger(__name__)

ATTENTION_REASON = "multiple violations recorded"


def _views(response_cls) -> Callable[[List[Any]], List[Any]]:
    def convert(records: List[Any]) -> List[Any]:
        return [response_cls.from_record(record) for record in records]
    return convert


class ScoringService:
    def __init__(self, db: AsyncSession, attention_policy: Optional[AttentionPolicy] = None):
        self.db = db
        self.lookups = LookupService(db)
        self.violations = ViolationService(db)
        self.achievements = AchievementService(db)
        self.permits = PermitService(db)
        self.notes = CounselingNoteService(db)
        self.attention_policy = attention_policy or ThresholdAttentionPolicy(
            threshold=settings.attention_threshold,
            reason=ATTENTION_REASON,
        )

    async def _best_effort(
        self,
        label: str,
        query: Awaitable[Any],
        default: Any,
        convert: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Run one sub-query. ``convert`` turns the rows into views before a
        later failure can roll back and expire them."""
        try:
            result = await query
            return convert(result) if convert is not None else result
        except SQLAlchemyError as e:
            logger.warning(f"BK aggregate '{label}' failed, using empty result: {e}")
            await self.db.rollback()
            return default

    async def _cached_total(self, student_id: UUID, kind: str, compute: Callable[[UUID], Awaitable[int]]) -> int:
        key = points_key(student_id, kind)
        cached = await cache.get(key)
        if cached is not None:
            return int(cached)
        total = await compute(student_id)
        await cache.set(key, total)
        return total

    # ------------------------------------------------------------------
    # Point totals
    # ------------------------------------------------------------------

    async def achievement_total(self, student_id: UUID) -> int:
        """Sum of achievement points, never negative"""
        return await self._cached_total(student_id, ACHIEVEMENT, self.achievements.get_student_achievement_points)

    async def violation_total(self, student_id: UUID) -> int:
        """Sum of violation points, zero or negative"""
        return await self._cached_total(student_id, VIOLATION, self.violations.get_student_violation_points)

    async def student_points(self, student_id: UUID, school_id: UUID) -> StudentPointsResponse:
        await self.lookups.ensure_student_in_school(student_id, school_id)
        achievement_points = await self.achievement_total(student_id)
        violation_points = await self.violation_total(student_id)
        return StudentPointsResponse(
            student_id=student_id,
            achievement_points=achievement_points,
            violation_points=violation_points,
            net_score=achievement_points + violation_points,
        )

    async def achievement_points(self, student_id: UUID, school_id: UUID) -> AchievementPointsResponse:
        student = await self.lookups.ensure_student_in_school(student_id, school_id)
        return AchievementPointsResponse(
            student_id=student_id,
            student_name=student.name,
            total_points=await self.achievement_total(student_id),
        )

    # ------------------------------------------------------------------
    # Student profile
    # ------------------------------------------------------------------

    async def student_profile(self, student_id: UUID, caller: CallerContext) -> StudentBKProfile:
        student = await self.lookups.ensure_student_in_school(student_id, caller.school_id)
        identity = dict(
            student_id=student.id,
            student_name=student.name,
            student_nis=student.nis or "",
            student_nisn=student.nisn or "",
            class_name=student.class_name,
        )
        recent = settings.recent_items_limit

        violation_count = await self._best_effort(
            "violation_count", self.violations.count_for_student(student_id), 0)
        achievement_count = await self._best_effort(
            "achievement_count", self.achievements.count_for_student(student_id), 0)
        permit_count = await self._best_effort(
            "permit_count", self.permits.count_for_student(student_id), 0)
        counseling_count = await self._best_effort(
            "counseling_count", self.notes.count_for_student(student_id), 0)

        achievement_points = await self._best_effort(
            "achievement_points", self.achievement_total(student_id), 0)
        violation_points = await self._best_effort(
            "violation_points", self.violation_total(student_id), 0)

        recent_violations = await self._best_effort(
            "recent_violations", self.violations.list_for_student(student_id, limit=recent), [],
            convert=_views(ViolationResponse))
        recent_achievements = await self._best_effort(
            "recent_achievements", self.achievements.list_for_student(student_id, limit=recent), [],
            convert=_views(AchievementResponse))
        recent_permits = await self._best_effort(
            "recent_permits", self.permits.list_for_student(student_id, limit=recent), [],
            convert=_views(PermitResponse))
        recent_counseling = await self._best_effort(
            "recent_counseling", self.notes.list_for_student(student_id, limit=recent), [],
            convert=lambda notes: project_notes(notes, caller))

        return StudentBKProfile(
            total_points=achievement_points,
            violation_points=violation_points,
            net_score=achievement_points + violation_points,
            violation_count=violation_count,
            achievement_count=achievement_count,
            permit_count=permit_count,
            counseling_count=counseling_count,
            recent_violations=recent_violations,
            recent_achievements=recent_achievements,
            recent_permits=recent_permits,
            recent_counseling=recent_counseling,
            **identity,
        )

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    async def violation_counts(self, school_id: UUID, minimum: int = 1) -> List[StudentViolationCount]:
        """Violation count per student of the school, students under ``minimum`` excluded"""
        violation_count = func.count(Violation.id).label("violation_count")
        stmt = (
            select(Student.id, Student.name, ClassModel.class_name, violation_count)
            .join(Violation, Violation.student_id == Student.id)
            .outerjoin(ClassModel, ClassModel.id == Student.class_id)
            .where(Student.tenant_id == school_id)
            .group_by(Student.id, Student.name, ClassModel.class_name)
            .having(func.count(Violation.id) >= max(minimum, 1))
        )
        result = await self.db.execute(stmt)
        return [
            StudentViolationCount(
                student_id=row[0],
                student_name=row[1],
                class_name=row[2] or "",
                violation_count=row[3],
            )
            for row in result.all()
        ]

    async def attention_list(self, school_id: UUID, limit: Optional[int] = None) -> List[AttentionItem]:
        limit = settings.attention_limit if limit is None else limit
        counts = await self.violation_counts(school_id, minimum=self.attention_policy.minimum_count)
        return self.attention_policy.rank(counts, limit)

    async def dashboard(self, school_id: UUID, limit: Optional[int] = None) -> BKDashboardResponse:
        recent = settings.recent_items_limit

        total_violations = await self._best_effort(
            "total_violations", self.violations.count_in_school(school_id), 0)
        total_achievements = await self._best_effort(
            "total_achievements", self.achievements.count_in_school(school_id), 0)
        total_permits = await self._best_effort(
            "total_permits", self.permits.count_in_school(school_id), 0)
        active_permits = await self._best_effort(
            "active_permits", self.permits.count_open_permits(school_id), 0)
        total_counseling = await self._best_effort(
            "total_counseling", self.notes.count_in_school(school_id), 0)

        recent_violations = await self._best_effort(
            "recent_violations", self.violations.recent_in_school(school_id, recent), [],
            convert=_views(ViolationResponse))
        recent_achievements = await self._best_effort(
            "recent_achievements", self.achievements.recent_in_school(school_id, recent), [],
            convert=_views(AchievementResponse))
        attention = await self._best_effort(
            "students_needing_attention", self.attention_list(school_id, limit), [])

        return BKDashboardResponse(
            total_violations=total_violations,
            total_achievements=total_achievements,
            total_permits=total_permits,
            active_permits=active_permits,
            total_counseling=total_counseling,
            recent_violations=recent_violations,
            recent_achievements=recent_achievements,
            students_needing_attention=attention,
        )
