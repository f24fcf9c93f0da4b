# api/main.py
"""FastAPI application entrypoint.

This file uses the application factory pattern to create and configure
the FastAPI application. Run with:

    uvicorn api.main:app --reload
"""

import logging
from typing import Optional
from fastapi import FastAPI

from config import AppSettings, settings as default_settings
from api.core.logging import setup_logging
from api.core.middleware import setup_middleware
from api.core.exception_handlers import setup_exception_handlers
from api.routers import router
from api.services.rate_limiter import SlidingWindowRateLimiter
from transcript.proofread_client import ProofreadClient

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Creates, configures, and returns a FastAPI application instance.

    This factory encapsulates the application's setup logic, making it
    reusable for testing and other deployment scenarios.

    Args:
        settings: Settings to use; defaults to the environment-derived ones.

    Returns:
        The configured FastAPI application instance.
    """
    settings = settings or default_settings

    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
    )

    # Process-wide services shared by every request
    app.state.settings = settings
    app.state.rate_limiter = SlidingWindowRateLimiter(
        limit=settings.RATE_LIMIT_REQUESTS,
        window_ms=settings.RATE_LIMIT_WINDOW_MS,
        max_keys=settings.RATE_LIMIT_MAX_CLIENTS,
    )
    # Without an app id there is no client; evaluations use the local fallback
    proofread_client = None
    if settings.PRIVATE_YAHOO_APP_ID:
        proofread_client = ProofreadClient(
            app_id=settings.PRIVATE_YAHOO_APP_ID,
            api_url=settings.PROOFREAD_API_URL,
            timeout=settings.PROOFREAD_TIMEOUT_SEC,
            max_chars=settings.PROOFREAD_MAX_CHARS,
        )
    app.state.proofreader = proofread_client

    setup_middleware(app, settings)

    setup_exception_handlers(app)

    app.include_router(router)

    if not settings.PRIVATE_YAHOO_APP_ID:
        logger.warning("PRIVATE_YAHOO_APP_ID is not set; corrections will use the local fallback")

    logger.info(
        "RATE_LIMIT -> %s requests / %s ms, max clients=%s",
        settings.RATE_LIMIT_REQUESTS, settings.RATE_LIMIT_WINDOW_MS, settings.RATE_LIMIT_MAX_CLIENTS
    )

    @app.on_event("shutdown")
    async def shutdown_event():
        if proofread_client is not None:
            proofread_client.close()
        logging.getLogger("api.main").info("Application shutting down.")

    return app


# Create the application instance for the Uvicorn server
app = create_app()
