# app/schemas/bk/counseling_schemas.py
"""Counseling note schemas.

A note is returned in one of two shapes. ``CounselingNoteRestrictedView``
has no ``internal_note`` field at all, so the confidential text cannot leak
through serialisation.
"""
from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from uuid import UUID
from pydantic import BaseModel, Field

from .common import StudentRef, RecordFilter


class CounselingNoteCreate(BaseModel):
    student_id: Optional[UUID] = None
    internal_note: Optional[str] = None
    parent_summary: Optional[str] = None


class CounselingNoteUpdate(BaseModel):
    internal_note: Optional[str] = None
    parent_summary: Optional[str] = None


class CounselingNoteFilter(RecordFilter):
    pass


class _CounselingNoteBase(StudentRef):
    id: UUID
    parent_summary: Optional[str] = None
    created_by: UUID
    creator_name: str = ""
    created_at: datetime


class CounselingNoteFullView(_CounselingNoteBase):
    view: Literal["full"] = "full"
    internal_note: str


class CounselingNoteRestrictedView(_CounselingNoteBase):
    view: Literal["restricted"] = "restricted"


CounselingNoteView = Annotated[
    Union[CounselingNoteFullView, CounselingNoteRestrictedView],
    Field(discriminator="view"),
]
