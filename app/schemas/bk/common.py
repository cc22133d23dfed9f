# app/schemas/bk/common.py
from datetime import date
from typing import Any, Optional
from uuid import UUID
from pydantic import BaseModel, Field, model_validator


class StudentRef(BaseModel):
    """Student identity fields shared by every case-record response."""
    student_id: UUID
    student_name: str = ""
    student_nis: str = ""
    student_nisn: str = ""
    class_name: str = ""

    @staticmethod
    def fields_from(record: Any) -> dict:
        student = getattr(record, "student", None)
        fields = {"student_id": record.student_id}
        if student is not None:
            fields.update(
                student_name=student.name,
                student_nis=student.nis or "",
                student_nisn=student.nisn or "",
                class_name=student.class_name,
            )
        return fields


def creator_name(record: Any) -> str:
    creator = getattr(record, "creator", None)
    return creator.display_name if creator is not None else ""


class RecordFilter(BaseModel):
    """Filters shared by every paginated case-record listing."""
    student_id: Optional[UUID] = None
    class_id: Optional[UUID] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None    # inclusive of the whole day
    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1)

    @model_validator(mode='after')
    def validate_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError('end_date must not be before start_date')
        return self
