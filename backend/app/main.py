"""
Noteful Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
Why:   Tests build apps with their own Settings (production mode, empty
       token) side by side; a factory keeps those instances independent.
How:   Factory pattern: create_app(settings) returns a configured FastAPI
       instance. The settings object is passed explicitly to the pieces that
       need it (bearer token middleware, error handler), nothing in the
       request pipeline reads the environment itself.
Who:   Called by uvicorn (uvicorn app.main:app) and by the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────┐ ┌────────┐ ┌─────────┐ ┌───────────────┐   │
    │  │ CORS │→│ Req ID │→│ Logging │→│ Bearer token  │   │
    │  └──────┘ └────────┘ └─────────┘ └───────┬───────┘   │
    │                        ┌─────────────────▼───────┐   │
    │                        │ Unhandled error → 500   │   │
    │                        └─────────────────────────┘   │
    │                                                      │
    │  Routes:                                             │
    │  ┌──────────────┐ ┌────────────┐ ┌──────────────┐    │
    │  │ /api/folders │ │ /api/notes │ │ /health      │    │
    │  └──────────────┘ └────────────┘ └──────────────┘    │
    │                                                      │
    │  Exception Handlers:                                 │
    │  ┌────────────────────────────────────────────────┐  │
    │  │ Validation→400 │ NotFound→404 │ Store/other→500 │  │
    │  └────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, check configuration, log readiness
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings as default_settings
from app.database import dispose_engine
from app.exceptions import (
    NotFoundError,
    StoreError,
    ValidationError,
)
from app.middleware.auth import BearerTokenMiddleware
from app.middleware.errors import UnhandledErrorMiddleware, error_body, server_error_response
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import folders, health, notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(config: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(config)
    logger.info("=" * 60)
    logger.info("Noteful Backend starting up (environment=%s)...", config.environment)

    try:
        config.validate_required_for_production()
    except ValueError as e:
        # Keep serving: every request is answered with 401 until the token is set
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Noteful Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def describe_request_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic/FastAPI error into an 'Invalid <field>' message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    names = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    if names and not names[-1].isdigit():
        return f"Invalid '{names[-1]}': {first.get('msg', 'invalid value')}"
    return f"Invalid request body: {first.get('msg', 'invalid value')}"


def register_exception_handlers(app: FastAPI, config: Settings) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        ValidationError         → 400 {"error": {"message"}}
        RequestValidationError  → 400 (malformed JSON, wrong types, bad path id)
        NotFoundError           → 404 {"error": {"message"}}
        StoreError              → 500, detail depends on environment
        Exception (fallback)    → 500, detail depends on environment

    401 never reaches a handler: BearerTokenMiddleware answers it itself.
    Exceptions escaping a route are converted by UnhandledErrorMiddleware;
    the Exception handler here only sees failures raised by the outer
    middleware themselves.
    """
    verbose = not config.is_production

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = describe_request_error(exc)
        logger.warning("[%s] Invalid request on %s: %s", request_id_var.get(""), request.url.path, message)
        return JSONResponse(status_code=400, content=error_body(message))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=error_body(exc.message))

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return server_error_response(exc, verbose)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        return server_error_response(exc, verbose)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build the app with; defaults to the process-wide
                settings loaded from the environment.
    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    config = config or default_settings

    app = FastAPI(
        title="Noteful API",
        description="Folders and the notes filed under them, behind a shared bearer token.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = config

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost):
    # CORS → RequestID → Logging → BearerToken → UnhandledError → routes
    app.add_middleware(UnhandledErrorMiddleware, verbose=not config.is_production)
    app.add_middleware(BearerTokenMiddleware, api_token=config.api_token)
    app.add_middleware(RequestLoggingMiddleware, enabled=config.environment != "test")
    app.add_middleware(RequestIDMiddleware)
    # Why outermost: browsers send preflight OPTIONS requests without the
    # Authorization header, so CORS must answer them before the token check.
    # Credentials are only allowed with an explicit origin list.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials="*" not in config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app, config)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(folders.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()
