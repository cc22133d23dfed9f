# app/schemas/bk/violation_schemas.py
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from .common import StudentRef, RecordFilter, creator_name


class ViolationCreate(BaseModel):
    # Required-ness is checked by the validation engine so that every
    # missing field maps to the same error kind.
    student_id: Optional[UUID] = None
    category_id: Optional[UUID] = None
    category: Optional[str] = Field(default=None, max_length=100)
    level: Optional[str] = None
    point: Optional[int] = None
    description: Optional[str] = None


class ViolationResponse(StudentRef):
    id: UUID
    category_id: Optional[UUID] = None
    category: str
    level: str
    point: int
    description: str
    created_by: UUID
    creator_name: str = ""
    created_at: datetime

    @classmethod
    def from_record(cls, violation) -> "ViolationResponse":
        return cls(
            id=violation.id,
            category_id=violation.category_id,
            category=violation.category,
            level=violation.level,
            point=violation.point,
            description=violation.description,
            created_by=violation.created_by,
            creator_name=creator_name(violation),
            created_at=violation.created_at,
            **StudentRef.fields_from(violation),
        )


class ViolationFilter(RecordFilter):
    level: Optional[str] = None
    category: Optional[str] = None   # case-insensitive substring


class ViolationCategoryCreate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=100)
    default_point: Optional[int] = None
    default_level: Optional[str] = None
    description: Optional[str] = None


class ViolationCategoryUpdate(BaseModel):
    """Schema for updating a category - all fields optional"""
    name: Optional[str] = Field(default=None, max_length=100)
    default_point: Optional[int] = None
    default_level: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class ViolationCategoryResponse(BaseModel):
    id: UUID
    school_id: UUID
    name: str
    default_point: int
    default_level: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
