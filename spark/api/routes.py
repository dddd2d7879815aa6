"""
FastAPI route handlers for the spot price endpoints.
Every request runs a fresh refresh cycle; nothing is cached between requests.
"""

from datetime import datetime

from fastapi import APIRouter, HTTPException

from spark.exceptions import SparkException
from spark.logging_config import get_logger
from spark.models.price import DailySummary, DisplaySummary, HealthResponse, Timeline
from spark.scheduler.refresh_scheduler import refresh_scheduler
from spark.services.price_service import price_service
from spark.services.range_selector import build_summary
from spark.utils.display import to_display

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        details={
            "service": "spark-spot-prices",
            "upstream": price_service.url,
            "scheduler_running": refresh_scheduler.is_running,
        }
    )


@router.get("/today", response_model=DailySummary)
async def get_today():
    """
    Lowest and highest ranked prices for today.

    When upstream data is unavailable both fields are null; this is not an error.
    """
    try:
        records = await price_service.fetch_prices()
        return build_summary(records)

    except SparkException as e:
        logger.error("Spark error", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")
    except Exception as e:
        logger.error("Unexpected error", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/today/display", response_model=DisplaySummary)
async def get_today_display():
    """
    Today's range as display strings ("--" for missing values).
    """
    try:
        records = await price_service.fetch_prices()
        return to_display(build_summary(records))

    except Exception as e:
        logger.error("Unexpected error", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/timeline", response_model=Timeline)
async def get_timeline():
    """
    Run a refresh cycle and return its two-entry timeline.
    """
    try:
        return await refresh_scheduler.run_cycle()

    except Exception as e:
        logger.error("Unexpected error", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")
