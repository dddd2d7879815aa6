"""
API package for the Spark spot price service.
Contains FastAPI route handlers.
"""

from .routes import router

__all__ = [
    "router",
]
