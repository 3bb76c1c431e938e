"""
FastAPI application for the VendoAI marketing backend.

This application provides:
1. Lead intake endpoints (/api/subscribe, /api/contact, /api/demo)
2. Vendor search over the static catalog (/api/vendors/search)
3. Deterministic RFP drafts (/api/rfps/generate)
4. The pre-built frontend bundle, with index.html served for unknown paths

Run with:
    uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from api.config import Settings, configure_logging
from api.routes import router
from shared.data_store import DataStore

logger = logging.getLogger("vendoai")
access_logger = logging.getLogger("access")

PLACEHOLDER_TEXT = "VendoAI backend running"
FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def format_validation_error(exc: RequestValidationError) -> str:
    """
    Flatten validation errors into one message.

    Each error becomes "<field>: <message>", e.g. "email: Field required".
    """
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        messages.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(messages) or "invalid request"


def add_error_handlers(app: FastAPI) -> None:
    """Map validation errors to 400 and unhandled errors to a generic 500."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": format_validation_error(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "internal server error"})


def add_access_log(app: FastAPI) -> None:
    """Log one line per request with status and duration."""

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                f"{request.method} {request.url.path} -> {status_code} ({elapsed_ms:.1f}ms)"
            )


def add_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the configured frontend origin, or every origin when unset."""
    origins = settings.cors_origins
    if origins == ["*"]:
        logger.warning("FRONTEND_ORIGIN is not set, allowing all origins (development only)")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
        expose_headers=["Content-Length"],
        max_age=12 * 60 * 60,
    )


def mount_frontend(app: FastAPI, frontend_path: Path) -> None:
    """
    Serve the frontend build with an index.html fallback for SPA routing.

    The fallback answers any method on an unmatched path.

    Must be called after the API routes are registered, since the catch-all
    route would otherwise shadow them.
    """
    root = frontend_path.resolve()
    index = root / "index.html"

    if not root.is_dir():
        logger.warning(f"Frontend build not found at {frontend_path}")

        @app.get("/", include_in_schema=False)
        def placeholder():
            return PlainTextResponse(PLACEHOLDER_TEXT)

        return

    logger.info(f"Serving frontend from {root}")

    @app.api_route("/{full_path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
    def frontend(full_path: str):
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        return FileResponse(index)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DataStore] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Server settings. Defaults to Settings.from_env().
        store: Data store shared by all handlers. Defaults to a fresh DataStore.
    """
    if settings is None:
        settings = Settings.from_env()
    if store is None:
        store = DataStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting VendoAI backend in {settings.mode} mode")
        yield
        logger.info("Shutting down")

    docs_kwargs = {}
    if settings.release:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="VendoAI Backend",
        description="""
    Backend for the VendoAI landing page.

    ## Endpoints

    - `/api/subscribe`, `/api/contact`, `/api/demo` - lead intake
    - `/api/vendors/search` - search the vendor catalog
    - `/api/rfps/generate` - generate an RFP draft
    """,
        version="1.0.0",
        lifespan=lifespan,
        **docs_kwargs,
    )
    app.state.settings = settings
    app.state.store = store

    add_error_handlers(app)
    add_access_log(app)
    add_cors(app, settings)

    app.include_router(router)
    mount_frontend(app, settings.frontend_path)

    return app


_settings = Settings.from_env()
configure_logging(_settings.mode)

app = create_app(_settings)
