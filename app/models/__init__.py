# app/models/__init__.py
"""Import all models here, if needed for Alembic migration."""
from .base import Base

# Shared models
from .shared.tenant import Tenant
from .user import User

# Tenant-specific models
from .tenant_specific.class_model import ClassModel
from .tenant_specific.student import Student
from .tenant_specific.violation import Violation, ViolationLevel
from .tenant_specific.violation_category import ViolationCategory, DEFAULT_VIOLATION_CATEGORIES
from .tenant_specific.achievement import Achievement
from .tenant_specific.permit import Permit
from .tenant_specific.counseling_note import CounselingNote

# This ensures all models are loaded when importing models
