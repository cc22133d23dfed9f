# app/services/bk/projection.py
"""Confidentiality projection of counseling notes.

Which shape a caller receives is decided here from the caller's role; a
restricted view is built without ever reading ``internal_note``.
"""
from typing import Iterable, List, Union

from ...core.caller import CallerContext
from ...models.tenant_specific.counseling_note import CounselingNote
from ...schemas.bk import CounselingNoteFullView, CounselingNoteRestrictedView
from ...schemas.bk.common import StudentRef, creator_name


def _common_fields(note: CounselingNote) -> dict:
    return dict(
        id=note.id,
        parent_summary=note.parent_summary,
        created_by=note.created_by,
        creator_name=creator_name(note),
        created_at=note.created_at,
        **StudentRef.fields_from(note),
    )


def full_view(note: CounselingNote) -> CounselingNoteFullView:
    return CounselingNoteFullView(internal_note=note.internal_note, **_common_fields(note))


def restricted_view(note: CounselingNote) -> CounselingNoteRestrictedView:
    return CounselingNoteRestrictedView(**_common_fields(note))


def project_note(
    note: CounselingNote, caller: CallerContext
) -> Union[CounselingNoteFullView, CounselingNoteRestrictedView]:
    if caller.can_view_internal_notes:
        return full_view(note)
    return restricted_view(note)


def project_notes(notes: Iterable[CounselingNote], caller: CallerContext) -> List:
    return [project_note(note, caller) for note in notes]
