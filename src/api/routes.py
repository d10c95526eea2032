"""HTTP routes for the feedback service.

# ─── ROUTE MAP ────────────────────────────────────────────────────────
#
# Endpoint            Method  Description
# ─────────────────────────────────────────────────────────────────────
# /                   GET     Feedback form page
# /exists             GET     "Title already taken" page
# /create             POST    Submit feedback → 302 to / or /exists
# /api/v1/health      GET     Health check + storage status
#
# Static files are mounted in main.py AFTER this router is included:
#   /feedback/<file>   persisted feedback files
#   /<file>            styles directory (catch-all, so it must be last)
#
# DEPENDENCY INJECTION PATTERN:
# The service and settings live on app.state (populated in main.py's
# lifespan / create_app) and are resolved with Depends() helpers.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import FileResponse, RedirectResponse

from src.api.schemas import HealthResponse
from src.config.settings import Settings
from src.models.feedback import FeedbackItem, SubmissionOutcome
from src.services.feedback_service import FeedbackService
from src.utils.errors import InvalidSubmissionError
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

APP_VERSION = "0.1.0"

router = APIRouter()


# ── Dependency helpers ────────────────────────────────────────────────
def _get_feedback_service(request: Request) -> FeedbackService:
    """Retrieve FeedbackService from app state; raise 503 if unavailable."""
    svc = getattr(request.app.state, "feedback_service", None)
    if svc is None:
        raise HTTPException(status_code=503, detail="Feedback service unavailable")
    return svc


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


FeedbackServiceDep = Annotated[FeedbackService, Depends(_get_feedback_service)]
SettingsDep = Annotated[Settings, Depends(_get_settings)]


# ── Pages ─────────────────────────────────────────────────────────────
@router.get("/", include_in_schema=False)
async def serve_form(settings: SettingsDep) -> FileResponse:
    return FileResponse(Path(settings.pages_dir) / "feedback.html")


@router.get("/exists", include_in_schema=False)
async def serve_exists(settings: SettingsDep) -> FileResponse:
    return FileResponse(Path(settings.pages_dir) / "exists.html")


# ── Submission ────────────────────────────────────────────────────────
@router.post("/create", summary="Submit feedback")
async def create_feedback(
    service: FeedbackServiceDep,
    title: Annotated[str | None, Form()] = None,
    text: Annotated[str, Form()] = "",
) -> RedirectResponse:
    """Store the submitted feedback, redirecting to ``/`` or ``/exists``.

    A missing title or one that is not filename-safe answers 400 (raised
    as ``InvalidSubmissionError`` and rendered by the error middleware).
    """
    if title is None:
        raise InvalidSubmissionError("Form field 'title' is required")

    item = FeedbackItem(title=title, content=text)
    outcome = await service.submit(item)

    if outcome is SubmissionOutcome.CREATED:
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    return RedirectResponse(url="/exists", status_code=status.HTTP_302_FOUND)


# ── Health ────────────────────────────────────────────────────────────
@router.get(
    "/api/v1/health",
    response_model=HealthResponse,
    summary="Application health check",
)
async def health_check(service: FeedbackServiceDep) -> HealthResponse:
    """Report whether the storage directories are in place."""
    store = service.store
    ready = store.is_ready()
    return HealthResponse(
        status="healthy" if ready else "unhealthy",
        version=APP_VERSION,
        storage={"provider": store.get_provider_name(), "ready": ready},
    )
