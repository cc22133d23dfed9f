# app/schemas/bk/achievement_schemas.py
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from .common import StudentRef, RecordFilter, creator_name


class AchievementCreate(BaseModel):
    student_id: Optional[UUID] = None
    title: Optional[str] = Field(default=None, max_length=255)
    point: Optional[int] = None
    description: Optional[str] = None


class AchievementResponse(StudentRef):
    id: UUID
    title: str
    point: int
    description: Optional[str] = None
    created_by: UUID
    creator_name: str = ""
    created_at: datetime

    @classmethod
    def from_record(cls, achievement) -> "AchievementResponse":
        return cls(
            id=achievement.id,
            title=achievement.title,
            point=achievement.point,
            description=achievement.description,
            created_by=achievement.created_by,
            creator_name=creator_name(achievement),
            created_at=achievement.created_at,
            **StudentRef.fields_from(achievement),
        )


class AchievementFilter(RecordFilter):
    pass


class AchievementPointsResponse(BaseModel):
    student_id: UUID
    student_name: str
    total_points: int
