# app/models/tenant_specific/violation.py
import enum
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship
from ..base import Base


class ViolationLevel(str, enum.Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    SEVERE = "severe"


class Violation(Base):
    __tablename__ = "violations"

    # Foreign Keys
    student_id = Column(Uuid(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Uuid(as_uuid=True), ForeignKey("violation_categories.id", ondelete="SET NULL"), nullable=True)
    created_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)

    # Category name is always stored, even without category_id
    category = Column(String(100), nullable=False)
    level = Column(String(20), nullable=False)
    point = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)

    # Relationships
    student = relationship("Student", lazy="joined")
    creator = relationship("User", lazy="joined")

    __table_args__ = (
        Index('idx_violation_student_created', 'student_id', 'created_at'),
    )
