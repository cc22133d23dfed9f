# app/schemas/bk/permit_schemas.py
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from .common import StudentRef, RecordFilter, creator_name


class PermitCreate(BaseModel):
    student_id: Optional[UUID] = None
    reason: Optional[str] = None
    exit_time: Optional[datetime] = None
    responsible_teacher_id: Optional[UUID] = None


class RecordReturnRequest(BaseModel):
    return_time: Optional[datetime] = None


class PermitDocumentAttach(BaseModel):
    document_url: str = Field(..., min_length=1, max_length=500)


class PermitResponse(StudentRef):
    id: UUID
    reason: str
    exit_time: datetime
    return_time: Optional[datetime] = None
    has_returned: bool
    responsible_teacher_id: UUID
    teacher_name: str = ""
    document_url: Optional[str] = None
    created_by: UUID
    creator_name: str = ""
    created_at: datetime

    @classmethod
    def from_record(cls, permit) -> "PermitResponse":
        teacher = getattr(permit, "teacher", None)
        return cls(
            id=permit.id,
            reason=permit.reason,
            exit_time=permit.exit_time,
            return_time=permit.return_time,
            has_returned=permit.has_returned,
            responsible_teacher_id=permit.responsible_teacher_id,
            teacher_name=teacher.display_name if teacher is not None else "",
            document_url=permit.document_url,
            created_by=permit.created_by,
            creator_name=creator_name(permit),
            created_at=permit.created_at,
            **StudentRef.fields_from(permit),
        )


class PermitFilter(RecordFilter):
    teacher_id: Optional[UUID] = None
    has_returned: Optional[bool] = None


class PermitDocumentResponse(BaseModel):
    """Receipt content for a permit; rendered to PDF by the export service."""
    permit_id: UUID
    student_name: str
    student_nis: str
    student_nisn: str
    class_name: str
    school_name: str
    reason: str
    exit_time: datetime
    responsible_teacher: str
    generated_at: datetime
