"""
FastAPI application with assembled routers.

Dependencies: fastapi, uvicorn, dataroom.api.routers, dataroom.observability
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dataroom import __version__
from dataroom.api.deps.dependencies import get_service_cache
from dataroom.configs import get_settings
from dataroom.observability.logger import configure_logging
from dataroom.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import analysis_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and pre-warms the service cache on startup.
    """
    configure_logging(get_settings().log_level)
    logger = logging.getLogger("uvicorn")

    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.analysis_pipeline
    logger.info("Service cache pre-warmed")

    yield

    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Data Room Document Analysis API",
        description="LLM-based analysis of uploaded data room documents",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Outermost middleware runs first: correlation wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(analysis_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "dataroom.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
