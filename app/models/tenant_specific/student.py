# app/models/tenant_specific/student.py
from sqlalchemy import Column, String, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from ..base import Base

class Student(Base):
    __tablename__ = "students"

    # Foreign Keys
    tenant_id = Column(Uuid(as_uuid=True), ForeignKey("tenants.id"), nullable=False, index=True)
    class_id = Column(Uuid(as_uuid=True), ForeignKey("classes.id"), nullable=True, index=True)

    # Basic Information
    name = Column(String(100), nullable=False, index=True)
    nis = Column(String(20), nullable=True, index=True)    # school-issued number
    nisn = Column(String(20), nullable=True, index=True)   # national student number
    status = Column(String(20), default="active", nullable=False)

    is_deleted = Column(Boolean, default=False, nullable=False, index=True)

    # Relationships
    tenant = relationship("Tenant", back_populates="students", lazy="joined")
    class_ = relationship("ClassModel", back_populates="students", lazy="joined")

    @property
    def class_name(self) -> str:
        return self.class_.class_name if self.class_ is not None else ""
