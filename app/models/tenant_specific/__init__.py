from .student import Student
from .class_model import ClassModel
from .violation import Violation, ViolationLevel
from .violation_category import ViolationCategory, DEFAULT_VIOLATION_CATEGORIES
from .achievement import Achievement
from .permit import Permit
from .counseling_note import CounselingNote

__all__ = [
    "Student",
    "ClassModel",
    "Violation",
    "ViolationLevel",
    "ViolationCategory",
    "DEFAULT_VIOLATION_CATEGORIES",
    "Achievement",
    "Permit",
    "CounselingNote",
]
