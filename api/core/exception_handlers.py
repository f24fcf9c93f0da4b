# api/core/exception_handlers.py
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from transcript.exceptions import ProofreadError

logger = logging.getLogger("api.errors")


async def proofread_exception_handler(request: Request, exc: ProofreadError) -> JSONResponse:
    """
    Map proofreading failures to `{"error": ...}` responses.

    Messages are the client-safe ones raised by the proofreading client;
    upstream details only go to the log.
    """
    logger.warning(
        f"Proofreading failed for request: {request.method} {request.url.path}: {exc.message}",
        extra={"path": str(request.url.path), "status_code": exc.status_code}
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to catch unhandled exceptions.

    This ensures that any unexpected error returns a standardized 500
    response and is logged with a traceback.
    """
    logger.error(
        f"Unhandled exception for request: {request.method} {request.url.path}",
        exc_info=True,  # This adds the full traceback to the log
        extra={
            "path": str(request.url.path),
            "method": request.method,
        }
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred on the server."
        }
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Adds custom exception handlers to the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ProofreadError, proofread_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
