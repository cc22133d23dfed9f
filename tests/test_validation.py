import logging
import uuid

import pytest

from app.core.exceptions import BKError, BKErrorKind
from app.models import ViolationCategory, ViolationLevel
from app.schemas.bk import ViolationCreate, AchievementCreate, PermitCreate, CounselingNoteCreate
from app.services.bk.validation import (
    CaseValidator,
    default_point_for_level,
    resolve_violation_point,
    validate_achievement_point,
    validate_category_point,
    validate_level,
    require_text,
)


def _category(point=-20, active=True):
    return ViolationCategory(
        school_id=uuid.uuid4(), name="Smoking", default_point=point,
        default_level="severe", is_active=active,
    )


class TestPointResolution:
    def test_level_defaults(self):
        assert default_point_for_level(ViolationLevel.LIGHT) == -5
        assert default_point_for_level(ViolationLevel.MODERATE) == -15
        assert default_point_for_level(ViolationLevel.SEVERE) == -30

    def test_explicit_point_wins(self):
        assert resolve_violation_point(-12, _category(), ViolationLevel.LIGHT) == -12

    def test_explicit_zero_is_kept(self):
        assert resolve_violation_point(0, _category(), ViolationLevel.SEVERE) == 0

    def test_active_category_default_used(self):
        assert resolve_violation_point(None, _category(-20), ViolationLevel.LIGHT) == -20

    def test_inactive_category_falls_back_to_level(self):
        assert resolve_violation_point(None, _category(-20, active=False), ViolationLevel.MODERATE) == -15

    def test_no_category_uses_level(self):
        assert resolve_violation_point(None, None, ViolationLevel.SEVERE) == -30

    def test_positive_explicit_point_is_accepted_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="app.services.bk.validation"):
            assert resolve_violation_point(5, None, ViolationLevel.LIGHT) == 5
        assert "positive explicit point" in caplog.text


class TestFieldRules:
    @pytest.mark.parametrize("value", ["light", "MODERATE", " severe "])
    def test_level_is_case_insensitive(self, value):
        assert validate_level(value).value == value.strip().lower()

    def test_unknown_level(self):
        with pytest.raises(BKError) as exc_info:
            validate_level("extreme")
        assert exc_info.value.kind == BKErrorKind.DOMAIN_RULE_VIOLATION
        assert exc_info.value.field == "level"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_text_is_missing(self, value):
        with pytest.raises(BKError) as exc_info:
            require_text(value, "description")
        assert exc_info.value.kind == BKErrorKind.MISSING_FIELD
        assert exc_info.value.code == "VAL_REQUIRED_FIELD"

    def test_category_point_must_not_be_positive(self):
        assert validate_category_point(0) == 0
        with pytest.raises(BKError) as exc_info:
            validate_category_point(1)
        assert exc_info.value.kind == BKErrorKind.DOMAIN_RULE_VIOLATION

    @pytest.mark.parametrize("point", [0, -1])
    def test_achievement_point_must_be_positive(self, point):
        with pytest.raises(BKError) as exc_info:
            validate_achievement_point(point)
        assert exc_info.value.kind == BKErrorKind.DOMAIN_RULE_VIOLATION

    def test_achievement_point_required(self):
        with pytest.raises(BKError) as exc_info:
            validate_achievement_point(None)
        assert exc_info.value.kind == BKErrorKind.MISSING_FIELD


class TestCaseValidator:
    async def test_missing_student_id(self, db, schools):
        validator = CaseValidator(db)
        with pytest.raises(BKError) as exc_info:
            await validator.build_violation(
                schools.school_a.id, schools.counselor_a.id,
                ViolationCreate(category="Tardiness", level="light", description="Late"),
            )
        assert exc_info.value.kind == BKErrorKind.MISSING_FIELD
        assert exc_info.value.field == "student_id"

    async def test_unknown_student(self, db, schools):
        validator = CaseValidator(db)
        with pytest.raises(BKError) as exc_info:
            await validator.build_achievement(
                schools.school_a.id, schools.counselor_a.id,
                AchievementCreate(student_id=uuid.uuid4(), title="Olympiad", point=10),
            )
        assert exc_info.value.kind == BKErrorKind.NOT_FOUND

    async def test_other_school_student_fails_tenancy_before_field_checks(self, db, schools):
        validator = CaseValidator(db)
        with pytest.raises(BKError) as exc_info:
            await validator.build_violation(
                schools.school_a.id, schools.counselor_a.id,
                ViolationCreate(student_id=schools.student_b.id),
            )
        assert exc_info.value.kind == BKErrorKind.TENANCY_VIOLATION
        assert exc_info.value.code == "AUTHZ_STUDENT_NOT_IN_SCHOOL"

    async def test_category_name_taken_from_category(self, db, schools):
        category = ViolationCategory(
            school_id=schools.school_a.id, name="Bullying", default_point=-25, default_level="severe",
        )
        db.add(category)
        await db.commit()

        violation = await CaseValidator(db).build_violation(
            schools.school_a.id, schools.counselor_a.id,
            ViolationCreate(
                student_id=schools.student_a.id, category_id=category.id,
                level="severe", description="Pushed a classmate",
            ),
        )
        assert violation.category == "Bullying"
        assert violation.category_id == category.id
        assert violation.point == -25

    async def test_other_school_category_does_not_resolve(self, db, schools):
        category = ViolationCategory(
            school_id=schools.school_b.id, name="Drugs", default_point=-50, default_level="severe",
        )
        db.add(category)
        await db.commit()

        violation = await CaseValidator(db).build_violation(
            schools.school_a.id, schools.counselor_a.id,
            ViolationCreate(
                student_id=schools.student_a.id, category_id=category.id, category="Other",
                level="light", description="Misc",
            ),
        )
        assert violation.category_id is None
        assert violation.point == -5

    async def test_category_name_required_without_category(self, db, schools):
        with pytest.raises(BKError) as exc_info:
            await CaseValidator(db).build_violation(
                schools.school_a.id, schools.counselor_a.id,
                ViolationCreate(student_id=schools.student_a.id, level="light", description="Late"),
            )
        assert exc_info.value.field == "category"

    async def test_permit_requires_exit_time(self, db, schools):
        with pytest.raises(BKError) as exc_info:
            await CaseValidator(db).build_permit(
                schools.school_a.id, schools.counselor_a.id,
                PermitCreate(
                    student_id=schools.student_a.id, reason="Sick",
                    responsible_teacher_id=schools.teacher_a.id,
                ),
            )
        assert exc_info.value.kind == BKErrorKind.MISSING_FIELD
        assert exc_info.value.field == "exit_time"

    async def test_counseling_note_requires_internal_note(self, db, schools):
        with pytest.raises(BKError) as exc_info:
            await CaseValidator(db).build_counseling_note(
                schools.school_a.id, schools.counselor_a.id,
                CounselingNoteCreate(student_id=schools.student_a.id, parent_summary="ok"),
            )
        assert exc_info.value.field == "internal_note"


CROSS_SCHOOL_BUILDS = [
    ("build_violation", lambda student_id: ViolationCreate(student_id=student_id, level="extreme", point=9)),
    ("build_achievement", lambda student_id: AchievementCreate(student_id=student_id, point=-3)),
    ("build_permit", lambda student_id: PermitCreate(student_id=student_id, reason="  ")),
    ("build_counseling_note", lambda student_id: CounselingNoteCreate(student_id=student_id)),
]


@pytest.mark.parametrize("builder, payload", CROSS_SCHOOL_BUILDS, ids=[b for b, _ in CROSS_SCHOOL_BUILDS])
async def test_every_record_kind_rejects_other_school_student(db, schools, builder, payload):
    build = getattr(CaseValidator(db), builder)
    with pytest.raises(BKError) as exc_info:
        await build(schools.school_a.id, schools.counselor_a.id, payload(schools.student_b.id))
    assert exc_info.value.kind == BKErrorKind.TENANCY_VIOLATION
    assert exc_info.value.field == "student_id"
