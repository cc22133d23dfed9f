# app/core/config.py
"""Application configuration using Pydantic."""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    database_url: str = 'postgresql+asyncpg://bk:bk@localhost:5432/bk'
    redis_url: str = 'redis://localhost:6379/0'

    app_name: str = 'bk-case-service'
    app_version: str = '1.0.0'
    environment: str = 'development'
    log_level: str = 'info'
    allowed_origins: List[str] = ['*']

    # Listing
    default_page_size: int = 20
    max_page_size: int = 100

    # Profiles and dashboards
    recent_items_limit: int = 5
    attention_threshold: int = 3
    attention_limit: int = 10

    # Read-through cache for per-student point totals
    cache_enabled: bool = False
    cache_ttl: int = 300  # 5 minutes

    model_config = {
        'env_file': '.env',
        'extra': 'ignore'
    }

settings = Settings()
