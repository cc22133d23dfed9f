# app/services/bk/achievement_service.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from ...models.tenant_specific.achievement import Achievement
from ...schemas.bk import AchievementCreate
from .record_service import CaseRecordService
from .validation import CaseValidator
from .points_cache import invalidate_points, ACHIEVEMENT

logger = logging.getLogger(__name__)


class AchievementService(CaseRecordService[Achievement]):
    resource = "achievement"

    def __init__(self, db: AsyncSession):
        super().__init__(Achievement, db)
        self.validator = CaseValidator(db)

    async def create_achievement(self, school_id: UUID, created_by: UUID, data: AchievementCreate) -> Achievement:
        achievement = await self.validator.build_achievement(school_id, created_by, data)
        achievement = await self.add(achievement)
        await invalidate_points(achievement.student_id, ACHIEVEMENT)
        logger.info(
            f"Achievement {achievement.id} recorded for student {achievement.student_id} "
            f"({achievement.point} points)"
        )
        return achievement

    async def get_student_achievements(self, student_id: UUID) -> List[Achievement]:
        return await self.list_for_student(student_id)

    async def get_student_achievement_points(self, student_id: UUID) -> int:
        return await self.sum_points_for_student(student_id)

    async def delete_achievement(self, achievement_id: UUID, school_id: UUID) -> None:
        achievement = await self.delete_in_school(achievement_id, school_id)
        await invalidate_points(achievement.student_id, ACHIEVEMENT)
        logger.info(f"Achievement {achievement_id} deleted")
