import pytest

from app.core.exceptions import BKError, BKErrorKind
from app.schemas.bk import AchievementCreate, AchievementFilter
from app.services.bk import AchievementService

from .factories import add_achievement


class TestAchievements:
    async def test_create(self, db, schools):
        achievement = await AchievementService(db).create_achievement(
            schools.school_a.id, schools.counselor_a.id,
            AchievementCreate(student_id=schools.student_a.id, title=" Math Olympiad ", point=50),
        )
        assert achievement.title == "Math Olympiad"
        assert achievement.point == 50
        assert achievement.description is None

    @pytest.mark.parametrize("point", [0, -10])
    async def test_point_must_be_positive(self, db, schools, point):
        with pytest.raises(BKError) as exc_info:
            await AchievementService(db).create_achievement(
                schools.school_a.id, schools.counselor_a.id,
                AchievementCreate(student_id=schools.student_a.id, title="Debate", point=point),
            )
        assert exc_info.value.kind == BKErrorKind.DOMAIN_RULE_VIOLATION

    async def test_title_required(self, db, schools):
        with pytest.raises(BKError) as exc_info:
            await AchievementService(db).create_achievement(
                schools.school_a.id, schools.counselor_a.id,
                AchievementCreate(student_id=schools.student_a.id, point=10),
            )
        assert exc_info.value.field == "title"

    async def test_points_total(self, db, schools):
        await add_achievement(db, schools.student_a, schools.counselor_a, point=100)
        await add_achievement(db, schools.student_a, schools.counselor_a, point=25)
        await add_achievement(db, schools.student_a2, schools.counselor_a, point=40)

        service = AchievementService(db)
        assert await service.get_student_achievement_points(schools.student_a.id) == 125
        assert await service.get_student_achievement_points(schools.student_a3.id) == 0

    async def test_listing_is_school_scoped(self, db, schools):
        await add_achievement(db, schools.student_a, schools.counselor_a)
        await add_achievement(db, schools.student_b, schools.counselor_b)

        page = await AchievementService(db).list_paginated(schools.school_b.id, AchievementFilter())
        assert page["total"] == 1
        assert page["items"][0].student_id == schools.student_b.id
