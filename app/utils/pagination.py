# app/utils/pagination.py
"""Pagination utilities for consistent API responses."""
from typing import Any, List, Tuple
from math import ceil

from ..core.config import settings


class Paginator:
    """Pagination utility class."""

    @staticmethod
    def normalize(page: int, page_size: int) -> Tuple[int, int]:
        """Apply defaults and cap page_size at the configured maximum."""
        page = page if page and page > 0 else 1
        if not page_size or page_size <= 0:
            page_size = settings.default_page_size
        return page, min(page_size, settings.max_page_size)

    @staticmethod
    def calculate_offset(page: int, page_size: int) -> int:
        """Calculate offset for database queries."""
        return (page - 1) * page_size

    @staticmethod
    def create_response(items: List[Any], page: int, page_size: int, total: int) -> dict:
        """Create standardized paginated response."""
        total_pages = ceil(total / page_size) if page_size > 0 else 0
        return {
            "items": items,
            "total": total,
            "page": page,
            "page_size": page_size,
            "total_pages": total_pages,
            "has_next": page < total_pages,
            "has_previous": page > 1,
        }
