"""Feedback service FastAPI application entry point.

Wires the file store, the feedback service and the routes together via
``app.state``.  Loads configuration from ``config/config.yaml`` and the
environment, configures structured logging, and mounts the static
directories.

Run with ``python -m src.main``; in development (``APP_ENV=development``,
the default) uvicorn restarts the server whenever a file under ``src/``,
``pages/`` or ``styles/`` changes.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from src.api.routes import APP_VERSION
from src.api.routes import router as feedback_router
from src.config.loader import load_config
from src.config.settings import Settings
from src.providers.feedback.file_feedback_store import FileFeedbackStore
from src.services.feedback_service import FeedbackService
from src.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = load_config()

configure_logging(settings)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Component assembly
# ---------------------------------------------------------------------------


def _build_all(app_settings: Settings) -> dict[str, Any]:
    """Build the store and service for *app_settings*."""
    store = FileFeedbackStore(
        feedback_dir=app_settings.feedback_dir,
        temp_dir=app_settings.temp_dir,
    )
    service = FeedbackService(
        store=store,
        cleanup_temp_on_conflict=app_settings.cleanup_temp_on_conflict,
    )
    return {
        "feedback_store": store,
        "feedback_service": service,
    }


# ---------------------------------------------------------------------------
# Application lifespan (startup / shutdown)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(application: FastAPI):  # noqa: ANN201
    """Create the storage directories on startup."""
    app_settings: Settings = application.state.settings

    # Pre-built components (tests) win over the default assembly.
    components = getattr(application.state, "components", None) or _build_all(app_settings)
    for key, value in components.items():
        setattr(application.state, key, value)

    await application.state.feedback_service.store.initialize()

    _logger.info(
        "app_startup",
        version=APP_VERSION,
        environment=app_settings.app_env,
        reload=app_settings.reload_enabled,
        feedback_dir=app_settings.feedback_dir,
        cleanup_temp_on_conflict=app_settings.cleanup_temp_on_conflict,
    )

    yield

    _logger.info("app_shutdown")


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(
    app_settings: Settings | None = None,
    components: dict[str, Any] | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    Parameters
    ----------
    app_settings:
        Settings to use; defaults to the module-level settings.
    components:
        Optional pre-built ``feedback_service`` (and friends) to put on
        ``app.state`` instead of building them from settings.
    """
    s = app_settings or settings

    application = FastAPI(
        title="Feedback Drop",
        version=APP_VERSION,
        description=(
            "Submit a titled piece of feedback through a form; each title is "
            "stored once as a text file and repeated titles are rejected."
        ),
        lifespan=_lifespan,
    )
    application.state.settings = s
    if components:
        application.state.components = components

    # -- Middleware (order matters: last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)

    # -- Routes --
    application.include_router(feedback_router)

    # -- Static files --
    # The feedback directory is created in the lifespan, so don't check
    # for it here.
    application.mount(
        "/feedback",
        StaticFiles(directory=s.feedback_dir, check_dir=False),
        name="feedback",
    )
    # Root mount is a catch-all and must come after every route.
    if Path(s.styles_dir).is_dir():
        application.mount(
            "/",
            StaticFiles(directory=s.styles_dir),
            name="styles",
        )

    return application


app = create_app()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def run() -> None:
    """Serve the app with uvicorn, hot-reloading in development."""
    reload = settings.reload_enabled
    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=reload,
        reload_dirs=settings.get_reload_dirs() if reload else None,
        reload_includes=["*.py", "*.html", "*.css"] if reload else None,
    )


if __name__ == "__main__":
    run()
