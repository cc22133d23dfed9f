# app/models/tenant_specific/violation_category.py
from sqlalchemy import Column, String, Integer, Text, Boolean, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from ..base import Base
from .violation import ViolationLevel


class ViolationCategory(Base):
    """Configurable violation category per school."""
    __tablename__ = "violation_categories"

    school_id = Column(Uuid(as_uuid=True), ForeignKey("tenants.id"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    default_point = Column(Integer, nullable=False, default=-5)
    default_level = Column(String(20), nullable=False, default=ViolationLevel.LIGHT.value)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    tenant = relationship("Tenant", back_populates="violation_categories", lazy="noload")

    __table_args__ = (
        CheckConstraint('default_point <= 0', name='ck_category_point_not_positive'),
    )


# (name, default_point, default_level, description) seeded for every new school
DEFAULT_VIOLATION_CATEGORIES = [
    ("Tardiness", -5, ViolationLevel.LIGHT, "Arriving late to school"),
    ("Truancy", -15, ViolationLevel.MODERATE, "Absent without notice"),
    ("Uniform", -5, ViolationLevel.LIGHT, "Not wearing the uniform according to the rules"),
    ("Behavior", -10, ViolationLevel.MODERATE, "Disrespectful behavior"),
    ("Violence", -30, ViolationLevel.SEVERE, "Physical violence"),
    ("Bullying", -25, ViolationLevel.SEVERE, "Bullying other students"),
    ("Smoking", -20, ViolationLevel.SEVERE, "Smoking on school grounds"),
    ("Drugs", -50, ViolationLevel.SEVERE, "Involvement with drugs"),
    ("Theft", -30, ViolationLevel.SEVERE, "Stealing"),
    ("Vandalism", -20, ViolationLevel.MODERATE, "Damaging school facilities"),
    ("Other", -5, ViolationLevel.LIGHT, "Other violations"),
]
