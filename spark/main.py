"""
Main application entry point for the Spark spot price service.
Initializes the FastAPI app and the refresh scheduler.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from spark.api.routes import router as api_router
from spark.config import settings
from spark.logging_config import setup_logging
from spark.scheduler.refresh_scheduler import refresh_scheduler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager for startup and shutdown procedures.
    """
    # Startup
    setup_logging()
    if settings.run_scheduler:
        await refresh_scheduler.start()

    yield

    # Shutdown
    await refresh_scheduler.stop()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app = FastAPI(
        title="Spark Spot Price API",
        description="Today's cheapest and most expensive electricity hours from spot-hinta.fi",
        version="1.0.0",
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "spark.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
