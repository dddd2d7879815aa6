"""
Services package for the Spark spot price service.
Contains the price fetcher and the range selector.
"""

from .price_service import SPOT_PRICES_URL, PriceService, price_service
from .range_selector import build_summary, select_range

__all__ = [
    "SPOT_PRICES_URL",
    "PriceService",
    "price_service",
    "build_summary",
    "select_range",
]
