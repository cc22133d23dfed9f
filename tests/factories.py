# tests/factories.py
"""Caller helpers and record factories shared by the test modules."""
from datetime import datetime, timezone
from typing import Optional

from app.core.caller import CallerContext, UserRole
from app.models import Tenant, User, Violation, Achievement, Permit, CounselingNote


# ==============================================================
# Callers
# ==============================================================

def make_caller(user: User, school: Tenant, role: Optional[UserRole] = None) -> CallerContext:
    return CallerContext(user_id=user.id, school_id=school.id, role=role or UserRole(user.role))


def caller_headers(caller: CallerContext) -> dict:
    return {
        "X-School-ID": str(caller.school_id),
        "X-User-ID": str(caller.user_id),
        "X-User-Role": caller.role.value,
    }


# ==============================================================
# Record factories (bypass validation, allow fixed timestamps)
# Relationships are set directly so views can be built without a lazy load
# ==============================================================

async def add_violation(db, student, creator, point=-5, level="light", category="Tardiness",
                        created_at: Optional[datetime] = None) -> Violation:
    violation = Violation(
        student=student, creator=creator, category=category,
        level=level, point=point, description="Recorded in test",
    )
    if created_at is not None:
        violation.created_at = created_at
    db.add(violation)
    await db.commit()
    return violation


async def add_achievement(db, student, creator, point=10, title="Olympiad",
                          created_at: Optional[datetime] = None) -> Achievement:
    achievement = Achievement(student=student, creator=creator, title=title, point=point)
    if created_at is not None:
        achievement.created_at = created_at
    db.add(achievement)
    await db.commit()
    return achievement


async def add_permit(db, student, teacher, creator, exit_time: Optional[datetime] = None,
                     return_time: Optional[datetime] = None) -> Permit:
    permit = Permit(
        student=student, teacher=teacher, creator=creator,
        reason="Family matter", exit_time=exit_time or datetime.now(timezone.utc),
        return_time=return_time,
    )
    db.add(permit)
    await db.commit()
    return permit


async def add_note(db, student, creator, internal_note="Discussed conflict at home",
                   parent_summary="Student is doing better") -> CounselingNote:
    note = CounselingNote(
        student=student, creator=creator,
        internal_note=internal_note, parent_summary=parent_summary,
    )
    db.add(note)
    await db.commit()
    return note


