"""
QuickNotes — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the NoteStore and
       TemplateRenderer, registers middleware, error handlers and routes, and
       returns the app. `app` at module level is what uvicorn imports.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │   Req ID     │→│    Logging      │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────┐ ┌──────────┐ ┌──────────────┐ ┌───────┐ │
    │  │ GET /  │ │ /notes   │ │ /notes/{id}  │ │/health│ │
    │  └────────┘ └──────────┘ └──────────────┘ └───────┘ │
    │                                                     │
    │  Error Fallback:                                    │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ Method→405 │ Form/Render→500  │   │
    │  │  error.html  →  plain text if that fails     │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from quicknotes import __version__
from quicknotes.config import Settings, settings
from quicknotes.exceptions import (
    FormParseError,
    NotFoundError,
    QuickNotesError,
    RenderError,
    UnsupportedMethodError,
)
from quicknotes.middleware.logging import RequestLoggingMiddleware
from quicknotes.middleware.request_id import RequestIDMiddleware, request_id_var
from quicknotes.routes import health, notes, pages
from quicknotes.schemas.note import ErrorResponse
from quicknotes.services.note_store import NoteStore
from quicknotes.services.templating import TemplateRenderer

logger = logging.getLogger(__name__)

PLAIN_FALLBACK = "Internal Server Error"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates quicknotes.access
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    cfg: Settings = app.state.settings
    setup_logging(cfg.log_level)

    logger.info("=" * 60)
    logger.info("%s %s starting up...", cfg.app_name, __version__)

    renderer: TemplateRenderer = app.state.renderer
    logger.info("Templates: %s", renderer.directory)
    missing = [name for name in ("index", "list", "view", "edit", "error")
               if not renderer.has_template(name)]
    if missing:
        # Requests using these will fail with RenderError and get the fallback page
        logger.warning("Missing templates: %s", ", ".join(missing))

    logger.info("listening on %s", cfg.listen_address)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down, discarding %d notes", cfg.app_name, len(app.state.store))


# ══════════════════════════════════════════════════════════════════════════
# Error Fallback
# ══════════════════════════════════════════════════════════════════════════

def wants_json(request: Request) -> bool:
    """True when the client asks for JSON and not for HTML."""
    accept = request.headers.get("accept", "").lower()
    return "application/json" in accept and "text/html" not in accept


def error_response(
    request: Request,
    status_code: int,
    message: str,
    error_code: str = "server_error",
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Translate a failure into the response the client sees.

    HTML clients get error.html rendered with `status_code`. If that render
    itself fails, the response degrades to plain-text "Internal Server Error"
    with status 500. JSON clients get an ErrorResponse body instead.
    """
    rid = request_id_var.get("")

    # The Exception handler runs outside RequestIDMiddleware, so set it here
    response_headers = dict(headers) if headers else {}
    if rid:
        response_headers["X-Request-ID"] = rid

    if wants_json(request):
        body = ErrorResponse(error=error_code, message=message, request_id=rid or None)
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(),
            headers=response_headers or None,
        )

    renderer: TemplateRenderer = request.app.state.renderer
    try:
        return renderer.render(
            "error",
            {"error": message, "status_code": status_code, "request_id": rid},
            status_code=status_code,
            headers=response_headers or None,
        )
    except RenderError as exc:
        logger.error("[%s] Error page failed to render: %s", rid, exc.message)
        return PlainTextResponse(
            PLAIN_FALLBACK,
            status_code=500,
            headers={"X-Request-ID": rid} if rid else None,
        )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the handlers that turn raised failures into responses.

    Handler hierarchy:
        NotFoundError           → 404 Not Found
        UnsupportedMethodError  → 405 Method Not Allowed (+ Allow header)
        FormParseError          → 500 Internal Server Error
        RenderError             → 500 Internal Server Error
        QuickNotesError (base)  → its status_code
        Starlette HTTPException → its own status (unknown paths etc.)
        Exception (fallback)    → 500, generic message, traceback logged
    """

    @app.exception_handler(QuickNotesError)
    async def handle_app_error(request: Request, exc: QuickNotesError):
        rid = request_id_var.get("")
        headers = None

        if isinstance(exc, NotFoundError):
            logger.info("[%s] %s: %s", rid, exc.message, exc.context.get("resource_id", ""))
        elif isinstance(exc, UnsupportedMethodError):
            logger.warning("[%s] %s on %s", rid, exc.message, request.url.path)
            headers = {"Allow": ", ".join(exc.allowed)}
        elif isinstance(exc, FormParseError):
            logger.warning("[%s] %s | Context: %s", rid, exc.message, exc.context)
        else:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)

        return error_response(
            request,
            status_code=exc.status_code,
            message=exc.message,
            error_code=exc.error_code,
            headers=headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return error_response(
            request,
            status_code=exc.status_code,
            message=str(exc.detail),
            error_code="http_error",
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(
            request,
            status_code=500,
            message="An unexpected error occurred.",
            error_code="internal_server_error",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Overrides the module-level settings
        store: An existing NoteStore to serve; a fresh empty one by default

    Returns:
        Fully configured FastAPI instance with its own store and renderer.
    """
    cfg = app_settings or settings

    app = FastAPI(
        title=f"{cfg.app_name}",
        description="In-memory note taking with server-rendered HTML pages.",
        version=__version__,
        lifespan=lifespan,
    )

    # A NoteStore with no notes is falsy (len 0), so test for None explicitly
    app.state.settings = cfg
    app.state.store = store if store is not None else NoteStore()
    app.state.renderer = TemplateRenderer(cfg.templates_dir)

    # Last added runs first: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(pages.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()
