# app/core/error_handlers.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from .exceptions import BKError, BKErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    BKErrorKind.MISSING_FIELD: 400,
    BKErrorKind.DOMAIN_RULE_VIOLATION: 422,
    BKErrorKind.NOT_FOUND: 404,
    BKErrorKind.TENANCY_VIOLATION: 403,
    BKErrorKind.CONFLICT: 409,
    BKErrorKind.FORBIDDEN: 403,
}

async def bk_exception_handler(request: Request, exc: BKError):
    """Handle BK domain errors"""
    status_code = STATUS_BY_KIND.get(exc.kind, 400)
    logger.info(f"BK error {exc.code}: {exc.message} - Path: {request.url.path}")
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": exc.to_dict()}
    )

async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unexpected error: {str(exc)} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}
        }
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BKError, bk_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
