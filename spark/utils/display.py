"""
Display helpers for turning a DailySummary into widget-style strings.
Hours are shown in the configured timezone as "HH.MM" and prices in
cents per kWh with two decimals; anything missing becomes "--".
"""

from datetime import datetime
from typing import Optional

import pytz

from spark.config import settings
from spark.models.price import DailySummary, DisplaySummary

PLACEHOLDER = "--"


def format_hour(timestamp: Optional[datetime], timezone: str = None) -> str:
    """
    Format the hour a price applies to.

    Args:
        timestamp: Price timestamp. Naive values are assumed to be UTC.
        timezone: Target timezone name, defaults to settings.display_timezone

    Returns:
        "HH.MM" in the target timezone, or "--" when timestamp is None
    """
    if timestamp is None:
        return PLACEHOLDER

    tz = pytz.timezone(timezone or settings.display_timezone)
    if timestamp.tzinfo is None:
        timestamp = pytz.UTC.localize(timestamp)

    return timestamp.astimezone(tz).strftime("%H.%M")


def format_price_cents(price: Optional[float]) -> str:
    """Format a EUR/kWh price as cents with two decimals."""
    if price is None:
        return PLACEHOLDER
    return f"{price * 100:.2f}"


def to_display(summary: DailySummary, timezone: str = None) -> DisplaySummary:
    lowest = summary.lowest
    highest = summary.highest
    return DisplaySummary(
        lowest_hour=format_hour(lowest.timestamp if lowest else None, timezone),
        lowest_price=format_price_cents(lowest.price_with_tax if lowest else None),
        highest_hour=format_hour(highest.timestamp if highest else None, timezone),
        highest_price=format_price_cents(highest.price_with_tax if highest else None),
    )
