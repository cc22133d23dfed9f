from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import BKError, BKErrorKind
from app.schemas.bk import PermitCreate, PermitFilter
from app.services.bk import PermitService

from .factories import add_permit

EXIT_TIME = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


async def _issue(db, schools, teacher=None, student=None):
    return await PermitService(db).create_permit(
        schools.school_a.id, schools.counselor_a.id,
        PermitCreate(
            student_id=(student or schools.student_a).id,
            reason="Dentist appointment",
            exit_time=EXIT_TIME,
            responsible_teacher_id=(teacher or schools.teacher_a).id,
        ),
    )


class TestPermitLifecycle:
    async def test_new_permit_is_open(self, db, schools):
        permit = await _issue(db, schools)
        assert permit.return_time is None
        assert permit.has_returned is False
        assert permit.teacher.display_name == "Pak Andi"

    async def test_record_return(self, db, schools):
        permit = await _issue(db, schools)
        returned = await PermitService(db).record_return(
            permit.id, schools.school_a.id, EXIT_TIME + timedelta(hours=2),
        )
        assert returned.has_returned is True

    async def test_second_return_conflicts(self, db, schools):
        permit = await _issue(db, schools)
        service = PermitService(db)
        await service.record_return(permit.id, schools.school_a.id, EXIT_TIME + timedelta(hours=2))

        with pytest.raises(BKError) as exc_info:
            await service.record_return(permit.id, schools.school_a.id, EXIT_TIME + timedelta(hours=3))
        assert exc_info.value.kind == BKErrorKind.CONFLICT
        assert exc_info.value.code == "PERMIT_ALREADY_RETURNED"

    async def test_return_time_required(self, db, schools):
        permit = await _issue(db, schools)
        with pytest.raises(BKError) as exc_info:
            await PermitService(db).record_return(permit.id, schools.school_a.id, None)
        assert exc_info.value.kind == BKErrorKind.MISSING_FIELD

    async def test_return_before_exit_is_accepted(self, db, schools):
        permit = await _issue(db, schools)
        returned = await PermitService(db).record_return(
            permit.id, schools.school_a.id, EXIT_TIME - timedelta(hours=1),
        )
        assert returned.has_returned is True

    async def test_return_in_other_school_not_found(self, db, schools):
        permit = await _issue(db, schools)
        with pytest.raises(BKError) as exc_info:
            await PermitService(db).record_return(permit.id, schools.school_b.id, EXIT_TIME)
        assert exc_info.value.kind == BKErrorKind.NOT_FOUND


class TestResponsibleTeacher:
    async def test_teacher_of_other_school(self, db, schools):
        with pytest.raises(BKError) as exc_info:
            await _issue(db, schools, teacher=schools.teacher_b)
        assert exc_info.value.kind == BKErrorKind.TENANCY_VIOLATION
        assert exc_info.value.code == "AUTHZ_TEACHER_NOT_IN_SCHOOL"

    async def test_platform_staff_accepted(self, db, schools):
        permit = await _issue(db, schools, teacher=schools.platform_admin)
        assert permit.responsible_teacher_id == schools.platform_admin.id


class TestPermitListing:
    async def test_ordered_by_exit_time(self, db, schools):
        late = await add_permit(db, schools.student_a, schools.teacher_a, schools.counselor_a,
                                exit_time=EXIT_TIME + timedelta(hours=3))
        early = await add_permit(db, schools.student_a, schools.teacher_a, schools.counselor_a,
                                 exit_time=EXIT_TIME)

        page = await PermitService(db).list_paginated(schools.school_a.id, PermitFilter())
        assert [p.id for p in page["items"]] == [late.id, early.id]

    async def test_has_returned_filter(self, db, schools):
        await add_permit(db, schools.student_a, schools.teacher_a, schools.counselor_a, exit_time=EXIT_TIME)
        await add_permit(db, schools.student_a2, schools.teacher_a, schools.counselor_a, exit_time=EXIT_TIME,
                         return_time=EXIT_TIME + timedelta(hours=1))
        service = PermitService(db)

        open_page = await service.list_paginated(schools.school_a.id, PermitFilter(has_returned=False))
        assert [p.student_id for p in open_page["items"]] == [schools.student_a.id]

        returned_page = await service.list_paginated(schools.school_a.id, PermitFilter(has_returned=True))
        assert [p.student_id for p in returned_page["items"]] == [schools.student_a2.id]

        assert await service.count_open_permits(schools.school_a.id) == 1

    async def test_teacher_filter(self, db, schools):
        await add_permit(db, schools.student_a, schools.teacher_a, schools.counselor_a)
        await add_permit(db, schools.student_a, schools.admin_a, schools.counselor_a)

        page = await PermitService(db).list_paginated(
            schools.school_a.id, PermitFilter(teacher_id=schools.admin_a.id),
        )
        assert page["total"] == 1


class TestPermitDocument:
    async def test_document_content(self, db, schools):
        permit = await _issue(db, schools)
        document = await PermitService(db).get_permit_document(permit.id, schools.school_a.id)
        assert document.student_name == "Budi Santoso"
        assert document.student_nis == "1001"
        assert document.class_name == "XI IPA 1"
        assert document.school_name == "SMA Negeri 1"
        assert document.responsible_teacher == "Pak Andi"

    async def test_attach_document(self, db, schools):
        permit = await _issue(db, schools)
        updated = await PermitService(db).attach_document(
            permit.id, schools.school_a.id, "https://files.example.org/permits/1.pdf",
        )
        assert updated.document_url == "https://files.example.org/permits/1.pdf"
