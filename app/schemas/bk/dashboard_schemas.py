# app/schemas/bk/dashboard_schemas.py
from typing import List
from uuid import UUID
from pydantic import BaseModel

from .violation_schemas import ViolationResponse
from .achievement_schemas import AchievementResponse
from .permit_schemas import PermitResponse
from .counseling_schemas import CounselingNoteView


class StudentPointsResponse(BaseModel):
    student_id: UUID
    achievement_points: int
    violation_points: int
    net_score: int


class StudentBKProfile(BaseModel):
    student_id: UUID
    student_name: str
    student_nis: str = ""
    student_nisn: str = ""
    class_name: str = ""
    total_points: int              # achievement point total
    violation_points: int
    net_score: int
    violation_count: int
    achievement_count: int
    permit_count: int
    counseling_count: int
    recent_violations: List[ViolationResponse] = []
    recent_achievements: List[AchievementResponse] = []
    recent_permits: List[PermitResponse] = []
    recent_counseling: List[CounselingNoteView] = []


class AttentionItem(BaseModel):
    student_id: UUID
    student_name: str
    class_name: str = ""
    violation_count: int
    reason: str


class BKDashboardResponse(BaseModel):
    total_violations: int = 0
    total_achievements: int = 0
    total_permits: int = 0
    active_permits: int = 0
    total_counseling: int = 0
    recent_violations: List[ViolationResponse] = []
    recent_achievements: List[AchievementResponse] = []
    students_needing_attention: List[AttentionItem] = []
