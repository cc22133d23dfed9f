"""Health check endpoints."""
from fastapi import APIRouter
import logging
import redis.asyncio as redis

from ..core.cache import cache
from ..core.config import settings
from ..core.database import health_check_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])

@router.get("/")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }

async def _cache_status() -> str:
    if not cache.enabled:
        return "disabled"
    try:
        await cache.connect()
        await cache.redis.ping()
        return "healthy"
    except redis.RedisError as e:
        logger.warning(f"Cache health check failed: {e}")
        return "unhealthy"

@router.get("/full-health")
async def full_health_check():
    """Database and cache status"""
    components = {
        "service": "healthy",
        "database": "healthy" if await health_check_db() else "unhealthy",
        "cache": await _cache_status(),
    }

    overall_status = "healthy" if all(
        status in ("healthy", "disabled") for status in components.values()
    ) else "degraded"

    return {
        "status": overall_status,
        "components": components,
    }
