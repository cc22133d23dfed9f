from . import health, bk

__all__ = [
    "health",
    "bk",
]
