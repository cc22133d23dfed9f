# app/schemas/bk/__init__.py
"""Pydantic schemas for BK (student case management) records."""
from .common import StudentRef
from .violation_schemas import (
    ViolationCreate, ViolationResponse, ViolationFilter,
    ViolationCategoryCreate, ViolationCategoryUpdate, ViolationCategoryResponse,
)
from .achievement_schemas import (
    AchievementCreate, AchievementResponse, AchievementFilter, AchievementPointsResponse,
)
from .permit_schemas import (
    PermitCreate, PermitResponse, PermitFilter, RecordReturnRequest,
    PermitDocumentResponse, PermitDocumentAttach,
)
from .counseling_schemas import (
    CounselingNoteCreate, CounselingNoteUpdate, CounselingNoteFilter,
    CounselingNoteFullView, CounselingNoteRestrictedView, CounselingNoteView,
)
from .dashboard_schemas import (
    StudentPointsResponse, StudentBKProfile, AttentionItem, BKDashboardResponse,
)
