"""
Test configuration and fixtures for the Spark spot price service tests.
Contains shared fixtures and test utilities.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from spark.main import create_app
from spark.models.price import PriceRecord
from spark.services.price_service import PriceService

HELSINKI_WINTER = timezone(timedelta(hours=2))


def make_transport(status_code: int = 200, body=None, raw: bytes = None) -> httpx.MockTransport:
    """
    Build a mock transport answering every request with a fixed response.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if raw is not None:
            return httpx.Response(status_code, content=raw)
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def test_app():
    """
    Create a test instance of the FastAPI application.
    """
    return create_app()


@pytest.fixture
def test_client(test_app):
    """
    Create a test client for the FastAPI application.
    """
    return TestClient(test_app)


@pytest.fixture
def upstream_payload() -> List[dict]:
    """
    A day of prices in the spot-hinta.fi /Today format.
    Hour 3 is the cheapest and hour 18 the most expensive.
    """
    base_time = datetime(2023, 1, 25, 0, 0, 0, tzinfo=HELSINKI_WINTER)
    prices = [0.10 + (hour % 12) * 0.01 for hour in range(24)]
    prices[3] = 0.0512
    prices[18] = 0.5743

    ranked = sorted(range(24), key=lambda hour: prices[hour])
    ranks = {hour: position + 1 for position, hour in enumerate(ranked)}

    return [
        {
            "Rank": ranks[hour],
            "DateTime": (base_time + timedelta(hours=hour)).isoformat(),
            "PriceWithTax": prices[hour],
        }
        for hour in range(24)
    ]


@pytest.fixture
def sample_price_records(upstream_payload) -> List[PriceRecord]:
    """
    Decoded records matching upstream_payload.
    """
    return [PriceRecord.model_validate(item) for item in upstream_payload]


@pytest.fixture
def service_for():
    """
    Factory for a PriceService wired to a mock transport.
    """
    def _build(status_code: int = 200, body=None, raw: bytes = None) -> PriceService:
        return PriceService(transport=make_transport(status_code, body, raw))

    return _build


@pytest.fixture
def payload_bytes(upstream_payload) -> bytes:
    return json.dumps(upstream_payload).encode()
