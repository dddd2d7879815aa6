"""
Data models package for the Spark spot price service.
Contains Pydantic models for price data and API responses.
"""

from .price import (
    DailySummary,
    DisplaySummary,
    HealthResponse,
    PriceRecord,
    Timeline,
    TimelineEntry,
)

__all__ = [
    "DailySummary",
    "DisplaySummary",
    "HealthResponse",
    "PriceRecord",
    "Timeline",
    "TimelineEntry",
]
