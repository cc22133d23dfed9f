from typing import Any, Callable, List, TypeVar, Generic
from pydantic import BaseModel

T = TypeVar('T')

class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a school-scoped listing"""
    items: List[T]
    total: int
    page: int
    page_size: int
    has_next: bool
    has_previous: bool
    total_pages: int

    @classmethod
    def from_page(cls, page: dict, convert: Callable[[Any], T]) -> "PaginatedResponse[T]":
        """Build from a ``Paginator.create_response`` dict, converting each ORM item"""
        return cls(**{**page, "items": [convert(item) for item in page["items"]]})
