"""
Blog API Backend - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn blog_api.main:app),
       or through the `blog-api` console script (run()).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌───────────────┐ ┌──────────┐ ┌────────────────┐  │
    │  │ ErrorBoundary │→│ AuthGate │→│ AccessLog      │  │
    │  └───────────────┘ └──────────┘ └────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────────────┐ ┌────────────────┐  │
    │  │ GET/POST /blogs            │ │ GET /health    │  │
    │  │ GET/PUT/DELETE /blogs/{id} │ └────────────────┘  │
    │  └────────────────────────────┘                     │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ BlogNotFound→404 │ BadParams→400 │ HTTP→err  │   │
    │  └──────────────────────────────────────────────┘   │
    │  Anything else → ErrorBoundary → 500                │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Log store size and delete bounds rule

    Shutdown:
    1. Log shutdown complete (the store is discarded with the process)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api import __version__
from blog_api.config import Settings, settings
from blog_api.exceptions import BlogNotFoundError
from blog_api.middleware import (
    AccessLogMiddleware,
    AuthGateMiddleware,
    ErrorBoundaryMiddleware,
)
from blog_api.routes import blogs, health
from blog_api.services.blog_store import build_store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure console logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    The logger name tags the originating stage:
        blog_api.errors  → ErrorBoundary
        blog_api.auth    → AuthGate
        blog_api.access  → AccessLog
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; log the store state on both ends."""
    # ── Startup ───────────────────────────────────────────────────────────
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Blog API starting up...")
    logger.info(
        "Store ready: %d blog(s), delete bounds: %s",
        len(app.state.store),
        app.state.store.delete_bounds,
    )
    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Blog API shutting down (%d blog(s) discarded)", len(app.state.store))
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers for the errors the API answers itself.

    Handler hierarchy:
        BlogNotFoundError       → 404, empty body, not logged
        RequestValidationError  → 400 {"error": ...} (e.g. /blogs/abc)
        HTTPException           → its own status {"error": detail}
                                  (unknown route 404, wrong method 405)

    There is deliberately no handler for Exception or MalformedPayloadError:
    those propagate out through the middleware chain to ErrorBoundary.
    """

    @app.exception_handler(BlogNotFoundError)
    async def handle_blog_not_found(request: Request, exc: BlogNotFoundError):
        return Response(status_code=404)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request parameters for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=400,
            content={"error": "Bad request: invalid request parameters."},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=exc.headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Request Pipeline
# ══════════════════════════════════════════════════════════════════════════

def register_pipeline(app: FastAPI) -> None:
    """
    Install the middleware chain.

    Starlette executes middleware in REVERSE order of addition. Adding
    AccessLog → AuthGate → ErrorBoundary yields the execution order
    ErrorBoundary → AuthGate → AccessLog → router.
    """
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(AuthGateMiddleware)
    app.add_middleware(ErrorBoundaryMiddleware)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Explicit settings (tests); defaults to the module singleton.

    Returns: Fully configured FastAPI instance with its own BlogStore.
    """
    cfg = app_settings or settings

    app = FastAPI(
        title=cfg.app_title,
        description="CRUD over an in-memory collection of blog posts.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.store = build_store(seed=cfg.seed_store, delete_bounds=cfg.delete_bounds)

    register_pipeline(app)
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(blogs.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Serve the module-level app with uvicorn on the configured host/port."""
    uvicorn.run(
        "blog_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `blog_api.main:app` to be importable
app = create_app()
