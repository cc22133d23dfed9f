# app/models/tenant_specific/permit.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship
from ..base import Base


class Permit(Base):
    """Supervised exit permit. Open until ``return_time`` is recorded."""
    __tablename__ = "permits"

    # Foreign Keys
    student_id = Column(Uuid(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    responsible_teacher_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    created_by = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)

    reason = Column(Text, nullable=False)
    exit_time = Column(DateTime(timezone=True), nullable=False, index=True)
    return_time = Column(DateTime(timezone=True), nullable=True)
    document_url = Column(String(500), nullable=True)

    # Relationships
    student = relationship("Student", lazy="joined")
    teacher = relationship("User", foreign_keys=[responsible_teacher_id], lazy="joined")
    creator = relationship("User", foreign_keys=[created_by], lazy="joined")

    __table_args__ = (
        Index('idx_permit_open', 'student_id', 'return_time'),
    )

    @property
    def has_returned(self) -> bool:
        return self.return_time is not None
