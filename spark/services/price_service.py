"""
Spot price service - fetches today's prices from spot-hinta.fi.
Any failure is logged and turned into an empty result so callers only
ever see "no data", never an exception.
"""

from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from spark.exceptions import DataFetchError
from spark.logging_config import get_logger
from spark.models.price import PriceRecord

logger = get_logger(__name__)

SPOT_PRICES_URL = "https://api.spot-hinta.fi/Today"

_records_adapter = TypeAdapter(List[PriceRecord])


class PriceService:
    """Fetches and decodes the daily spot price list."""

    def __init__(self, url: str = SPOT_PRICES_URL, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self._transport = transport

    async def fetch_prices(self) -> List[PriceRecord]:
        """
        Fetch today's spot prices.

        Returns:
            Decoded price records, or an empty list when the data is unavailable
            for any reason (network, HTTP status, JSON or field decoding).
        """
        try:
            payload = await self._fetch_json()
            records = self._parse_records(payload)
        except DataFetchError as e:
            logger.error("Error loading spot prices", url=self.url, error=str(e))
            return []

        logger.info("Fetched spot prices", url=self.url, count=len(records))
        return records

    async def _fetch_json(self) -> Any:
        """Download and JSON-decode the response body."""
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            raise DataFetchError(f"HTTP error: {e}")
        except ValueError as e:
            raise DataFetchError(f"Invalid JSON: {e}")
        except Exception as e:
            raise DataFetchError(f"Unexpected error: {e}")

    def _parse_records(self, payload: Any) -> List[PriceRecord]:
        """Validate the decoded JSON as a list of price records."""
        if not isinstance(payload, list):
            raise DataFetchError(f"Expected a JSON array, got {type(payload).__name__}")

        try:
            return _records_adapter.validate_python(payload)
        except ValidationError as e:
            raise DataFetchError(f"Decoding failed: {e.error_count()} invalid field(s): {e}")


# Global price service instance
price_service = PriceService()
