# app/routers/bk/deps.py
from typing import Type, TypeVar
from pydantic import BaseModel, ValidationError

from ...core.exceptions import domain_rule_violation

F = TypeVar('F', bound=BaseModel)


def build_filter(filter_cls: Type[F], **params) -> F:
    """Build a listing filter from query parameters, dropping unset ones"""
    try:
        return filter_cls(**{key: value for key, value in params.items() if value is not None})
    except ValidationError as e:
        first = e.errors()[0]
        raise domain_rule_violation(first.get("msg", "Invalid filter"))
