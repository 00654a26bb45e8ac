"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, sales_agent.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sales_agent.api import api_router
from sales_agent.api.deps.dependencies import get_service_cache
from sales_agent.configs import get_settings
from sales_agent.core.exceptions import ProviderConfigError
from sales_agent.observability.logger import configure_logging
from sales_agent.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging(get_settings().log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    try:
        _ = cache.llm_driver
        logger.info("Service cache pre-warmed")
    except ProviderConfigError as e:
        logger.warning(f"LLM driver unavailable at startup: {e}")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


async def provider_config_error_handler(request: Request, exc: ProviderConfigError) -> JSONResponse:
    """Missing provider credentials surface as a server error on agent calls."""
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": exc.message},
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Sales Agent API",
        description="Conversational sales agent with guideline-driven prompting",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(ProviderConfigError, provider_config_error_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "sales_agent.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
