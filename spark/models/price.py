"""
Pydantic data models for spot price data and API responses.
Defines the structure for upstream price records and the derived summaries.
"""

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Extended ISO-8601 date-time with seconds and a mandatory offset.
_ISO8601_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(Z|[+-]\d{2}:\d{2})")


class PriceRecord(BaseModel):
    """
    Represents a single hourly spot price from spot-hinta.fi.

    Based on the /Today JSON format:
    {"Rank": 1, "DateTime": "2023-01-25T03:00:00+02:00", "PriceWithTax": 0.0512}

    Every field may be null or missing upstream.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    rank: Optional[int] = Field(
        default=None,
        alias="Rank",
        strict=True,
        description="Price position for the day, 1 = cheapest"
    )
    timestamp: Optional[datetime] = Field(
        default=None,
        alias="DateTime",
        description="Start of the hour the price applies to (ISO-8601 with offset)"
    )
    price_with_tax: Optional[float] = Field(
        default=None,
        alias="PriceWithTax",
        strict=True,
        description="Price including tax (EUR/kWh)"
    )

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_iso8601(cls, value):
        """Accept only ISO-8601 strings carrying a UTC offset."""
        if value is None or isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError(f"DateTime must be an ISO-8601 string, got {type(value).__name__}")

        if not _ISO8601_PATTERN.fullmatch(value):
            raise ValueError(f"DateTime '{value}' is not an ISO-8601 date-time with offset")

        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        return datetime.fromisoformat(text)


class DailySummary(BaseModel):
    """
    Lowest and highest ranked prices of the day, computed once per cycle.
    """
    model_config = ConfigDict(frozen=True)

    as_of: datetime = Field(description="When the summary was computed")
    lowest: Optional[PriceRecord] = Field(default=None, description="Cheapest ranked record")
    highest: Optional[PriceRecord] = Field(default=None, description="Most expensive ranked record")

    @property
    def has_data(self) -> bool:
        return self.lowest is not None or self.highest is not None


class TimelineEntry(BaseModel):
    """One display state: the summary to show from `date` onwards."""
    model_config = ConfigDict(frozen=True)

    date: datetime
    summary: DailySummary


class Timeline(BaseModel):
    """
    Output of a refresh cycle.

    Holds the "now" entry and the entry for the next refresh, both carrying
    the same summary. The next cycle should start at `refresh_at`.
    """
    entries: List[TimelineEntry]
    refresh_at: datetime


class DisplaySummary(BaseModel):
    """
    Display strings for a summary, with "--" wherever data is missing.
    """
    lowest_hour: str
    lowest_price: str
    highest_hour: str
    highest_price: str
    unit: str = "snt/kWh"


class HealthResponse(BaseModel):
    """
    Health check response model.
    """
    status: str = Field(description="Health status")
    timestamp: datetime = Field(description="Health check timestamp")
    details: Optional[dict] = Field(default=None, description="Additional health details")
