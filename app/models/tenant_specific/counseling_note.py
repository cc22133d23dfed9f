# app/models/tenant_specific/counseling_note.py
from sqlalchemy import Column, Text, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship
from ..base import Base


class CounselingNote(Base):
    __tablename__ = "counseling_notes"

    # Foreign Keys
    student_id = Column(Uuid(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)

    internal_note = Column(Text, nullable=False)    # BK role only
    parent_summary = Column(Text, nullable=True)    # visible outside the BK role

    # Relationships
    student = relationship("Student", lazy="joined")
    creator = relationship("User", lazy="joined")

    __table_args__ = (
        Index('idx_counseling_student_created', 'student_id', 'created_at'),
    )
