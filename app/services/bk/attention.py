# app/services/bk/attention.py
"""Ranking policies for the dashboard's "needs attention" list."""
from dataclasses import dataclass
from typing import List, Protocol, Sequence
from uuid import UUID

from ...schemas.bk import AttentionItem


@dataclass(frozen=True)
class StudentViolationCount:
    student_id: UUID
    student_name: str
    class_name: str
    violation_count: int


class AttentionPolicy(Protocol):
    # Rows below this count are never fetched from the database
    minimum_count: int

    def rank(self, counts: Sequence[StudentViolationCount], limit: int) -> List[AttentionItem]:
        ...


class ThresholdAttentionPolicy:
    """Students with at least ``threshold`` violations, most violations first."""

    def __init__(self, threshold: int = 3, reason: str = "multiple violations recorded"):
        self.threshold = threshold
        self.reason = reason

    @property
    def minimum_count(self) -> int:
        return self.threshold

    def rank(self, counts: Sequence[StudentViolationCount], limit: int) -> List[AttentionItem]:
        flagged = [row for row in counts if row.violation_count >= self.threshold]
        flagged.sort(key=lambda row: (-row.violation_count, row.student_name))
        return [
            AttentionItem(
                student_id=row.student_id,
                student_name=row.student_name,
                class_name=row.class_name,
                violation_count=row.violation_count,
                reason=self.reason,
            )
            for row in flagged[:max(limit, 0)]
        ]
