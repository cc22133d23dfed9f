# app/models/tenant_specific/achievement.py
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Index, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from ..base import Base


class Achievement(Base):
    __tablename__ = "achievements"

    # Foreign Keys
    student_id = Column(Uuid(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)

    title = Column(String(255), nullable=False)
    point = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)

    # Relationships
    student = relationship("Student", lazy="joined")
    creator = relationship("User", lazy="joined")

    __table_args__ = (
        CheckConstraint('point > 0', name='ck_achievement_point_positive'),
        Index('idx_achievement_student_created', 'student_id', 'created_at'),
    )
