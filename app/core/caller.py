# app/core/caller.py
"""Caller identity resolved from the upstream gateway.

Authentication happens in front of this service; the gateway forwards the
authenticated user, school and role as headers. The BK services decide what
a caller may see from ``CallerContext.role``, never from a client-supplied
visibility flag.
"""
import enum
from typing import Optional
from uuid import UUID
from fastapi import Depends, Header, HTTPException
from pydantic import BaseModel

from .exceptions import forbidden


class UserRole(str, enum.Enum):
    SUPER_ADMIN = "super_admin"
    SCHOOL_ADMIN = "school_admin"
    COUNSELOR = "counselor"           # BK role
    HOMEROOM_TEACHER = "homeroom_teacher"
    TEACHER = "teacher"
    PARENT = "parent"
    STUDENT = "student"


# Roles allowed to record violations, achievements, permits and categories
BK_WRITE_ROLES = frozenset({UserRole.COUNSELOR, UserRole.SCHOOL_ADMIN})

# Roles allowed to read internal counseling notes and write counseling notes
BK_CONFIDENTIAL_ROLES = frozenset({UserRole.COUNSELOR})


class CallerContext(BaseModel):
    user_id: UUID
    school_id: UUID
    role: UserRole

    @property
    def can_write_records(self) -> bool:
        return self.role in BK_WRITE_ROLES

    @property
    def can_view_internal_notes(self) -> bool:
        return self.role in BK_CONFIDENTIAL_ROLES


async def get_caller(
    x_school_id: Optional[UUID] = Header(None),
    x_user_id: Optional[UUID] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> CallerContext:
    """FastAPI dependency building the caller context from gateway headers"""
    if not x_school_id:
        raise HTTPException(
            status_code=400,
            detail={"code": "TENANT_REQUIRED", "message": "School context is required"}
        )
    if not x_user_id or not x_user_role:
        raise HTTPException(
            status_code=401,
            detail={"code": "AUTH_REQUIRED", "message": "Authentication is required"}
        )
    try:
        role = UserRole(x_user_role.strip().lower())
    except ValueError:
        raise HTTPException(
            status_code=403,
            detail={"code": "AUTHZ_ROLE_DENIED", "message": "Unknown role"}
        )
    return CallerContext(user_id=x_user_id, school_id=x_school_id, role=role)


async def get_bk_writer(caller: CallerContext = Depends(get_caller)) -> CallerContext:
    """Callers allowed to create or delete BK records"""
    if not caller.can_write_records:
        raise forbidden()
    return caller
