# app/services/bk/points_cache.py
"""Read-through cache keys for per-student point totals.

Totals are always computed from source rows; the cache only short-circuits
repeated reads and is dropped on every write of the same kind.
"""
from uuid import UUID

from ...core.cache import cache

ACHIEVEMENT = "achievement"
VIOLATION = "violation"


def points_key(student_id: UUID, kind: str) -> str:
    return cache.make_key("bk", "points", student_id, kind)


async def invalidate_points(student_id: UUID, kind: str) -> None:
    await cache.delete(points_key(student_id, kind))
