# app/services/bk/__init__.py
from .violation_service import ViolationService
from .category_service import ViolationCategoryService
from .achievement_service import AchievementService
from .permit_service import PermitService
from .counseling_service import CounselingNoteService
from .scoring_service import ScoringService

__all__ = [
    "ViolationService",
    "ViolationCategoryService",
    "AchievementService",
    "PermitService",
    "CounselingNoteService",
    "ScoringService",
]
