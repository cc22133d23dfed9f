# app/models/shared/tenant.py
"""Tenant (School) model definition."""
from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from ..base import Base

class Tenant(Base):
    __tablename__ = "tenants"

    # Basic Information
    school_code = Column(String(10), unique=True, nullable=False, index=True)
    school_name = Column(String(200), nullable=False, index=True)
    address = Column(String(500), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    students = relationship("Student", back_populates="tenant", lazy="noload")
    violation_categories = relationship("ViolationCategory", back_populates="tenant", lazy="noload")
