# app/core/exceptions.py
"""Error kinds raised by the BK case-management services.

Every failure is a single ``BKError`` carrying a closed ``BKErrorKind``.
Services never compare errors by identity; the HTTP boundary maps the kind
to a status code (see ``error_handlers``).
"""
import enum
from typing import Optional


class BKErrorKind(str, enum.Enum):
    MISSING_FIELD = "missing_field"
    DOMAIN_RULE_VIOLATION = "domain_rule_violation"
    NOT_FOUND = "not_found"
    TENANCY_VIOLATION = "tenancy_violation"
    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"


class BKError(Exception):
    """Base exception for the BK subsystem."""
    def __init__(
        self,
        kind: BKErrorKind,
        code: str,
        message: str,
        field: Optional[str] = None
    ):
        self.kind = kind
        self.code = code
        self.message = message
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict:
        detail = {"code": self.code, "message": self.message}
        if self.field:
            detail["field"] = self.field
        return detail


def missing_field(field: str) -> BKError:
    label = field.replace("_", " ")
    return BKError(
        BKErrorKind.MISSING_FIELD,
        "VAL_REQUIRED_FIELD",
        f"{label[:1].upper()}{label[1:]} is required",
        field=field,
    )


def domain_rule_violation(message: str, field: Optional[str] = None) -> BKError:
    return BKError(BKErrorKind.DOMAIN_RULE_VIOLATION, "VAL_INVALID_VALUE", message, field=field)


def not_found(resource: str) -> BKError:
    label = resource.replace("_", " ")
    return BKError(
        BKErrorKind.NOT_FOUND,
        f"NOT_FOUND_{resource.upper()}",
        f"{label[:1].upper()}{label[1:]} not found",
    )


def tenancy_violation(resource: str) -> BKError:
    return BKError(
        BKErrorKind.TENANCY_VIOLATION,
        f"AUTHZ_{resource.upper()}_NOT_IN_SCHOOL",
        f"{resource.capitalize()} does not belong to this school",
        field=f"{resource}_id",
    )


def conflict(code: str, message: str) -> BKError:
    return BKError(BKErrorKind.CONFLICT, code, message)


def forbidden(message: str = "You do not have permission to access this resource") -> BKError:
    return BKError(BKErrorKind.FORBIDDEN, "AUTHZ_ROLE_DENIED", message)
