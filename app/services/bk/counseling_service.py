# app/services/bk/counseling_service.py
import logging
from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.caller import CallerContext
from ...core.exceptions import forbidden, domain_rule_violation
from ...models.tenant_specific.counseling_note import CounselingNote
from ...schemas.bk import (
    CounselingNoteCreate, CounselingNoteUpdate, CounselingNoteFilter, CounselingNoteFullView,
)
from .record_service import CaseRecordService
from .validation import CaseValidator
from .projection import project_note, project_notes, full_view

logger = logging.getLogger(__name__)


class CounselingNoteService(CaseRecordService[CounselingNote]):
    resource = "counseling_note"

    def __init__(self, db: AsyncSession):
        super().__init__(CounselingNote, db)
        self.validator = CaseValidator(db)

    @staticmethod
    def _require_counselor(caller: CallerContext) -> None:
        if not caller.can_view_internal_notes:
            raise forbidden("Only counselors can manage counseling notes")

    async def create_note(self, caller: CallerContext, data: CounselingNoteCreate) -> CounselingNoteFullView:
        self._require_counselor(caller)
        note = await self.validator.build_counseling_note(caller.school_id, caller.user_id, data)
        note = await self.add(note)
        logger.info(f"Counseling note {note.id} recorded for student {note.student_id}")
        return full_view(note)

    async def get_note(self, note_id: UUID, caller: CallerContext):
        note = await self.get_in_school(note_id, caller.school_id)
        return project_note(note, caller)

    async def get_student_notes(self, student_id: UUID, caller: CallerContext) -> List:
        notes = await self.list_for_student(student_id)
        return project_notes(notes, caller)

    async def list_notes(self, caller: CallerContext, filters: CounselingNoteFilter) -> dict:
        page = await self.list_paginated(caller.school_id, filters)
        page["items"] = project_notes(page["items"], caller)
        return page

    async def update_note(self, note_id: UUID, caller: CallerContext, data: CounselingNoteUpdate) -> CounselingNoteFullView:
        """Replace whichever of the two texts is supplied non-empty"""
        self._require_counselor(caller)
        note = await self.get_in_school(note_id, caller.school_id)

        changes = {}
        if data.internal_note is not None and data.internal_note.strip():
            changes["internal_note"] = data.internal_note.strip()
        if data.parent_summary is not None and data.parent_summary.strip():
            changes["parent_summary"] = data.parent_summary.strip()
        if not changes:
            raise domain_rule_violation("No changes supplied")

        note = await self.update(note, changes)
        return full_view(note)

    async def delete_note(self, note_id: UUID, caller: CallerContext) -> None:
        self._require_counselor(caller)
        await self.delete_in_school(note_id, caller.school_id)
        logger.info(f"Counseling note {note_id} deleted")
