"""
Pastebin Lite - Main FastAPI application.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pastebin.clock import Clock
from pastebin.config import Settings, settings as default_settings
from pastebin.database import RecordStore, connect_store
from pastebin.errors import PastebinError
from pastebin.routes import health, pages
from pastebin.routes.records import build_router
from pastebin.variants import VARIANTS

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def pastebin_error_handler(request: Request, exc: PastebinError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors, reported like any other validation failure."""
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        message = "Invalid JSON body"
    else:
        message = "Request body must be a JSON object"
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        store: Record store; when omitted, Redis is connected on startup
        clock: Base clock for view/create endpoints (defaults to wall clock)

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Pastebin Lite",
        description="A lightweight Pastebin-like application for sharing text",
        version="1.0.0",
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.clock = clock

    # Add CORS middleware (optional, for cross-origin requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PastebinError, pastebin_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include route modules
    app.include_router(health.router)
    for policy in VARIANTS:
        app.include_router(build_router(policy))
    app.include_router(pages.router)

    @app.on_event("startup")
    async def startup_event():
        """Startup event handler."""
        logger.info("Pastebin Lite application starting...")

        if app.state.store is None:
            app.state.store = connect_store(settings)

        if settings.TEST_MODE:
            logger.warning("TEST_MODE is enabled: x-test-now-ms header overrides the clock")

        # Log database status
        if app.state.store.using_fallback:
            logger.warning("⚠️  DATABASE: Using IN-MEMORY storage (Redis not available)")
            logger.warning("   Data will NOT persist across server restarts!")
        else:
            logger.info("✅ DATABASE: Store ready")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Shutdown event handler."""
        logger.info("Pastebin Lite application shutting down...")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "pastebin.main:app",
        host="0.0.0.0",
        port=8000,
        reload=default_settings.DEBUG,
    )
