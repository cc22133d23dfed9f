# app/models/tenant_specific/class_model.py
from sqlalchemy import Column, String, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from ..base import Base


class ClassModel(Base):
    __tablename__ = "classes"

    # Foreign Keys
    tenant_id = Column(Uuid(as_uuid=True), ForeignKey("tenants.id"), nullable=False, index=True)

    # Class Information
    class_name = Column(String(50), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("tenant_id", "class_name", name="uq_class_identity"),
    )

    # Relationships
    students = relationship("Student", back_populates="class_", lazy="noload")
