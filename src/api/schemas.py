"""Pydantic response schemas for the feedback service's JSON endpoints.

The HTML routes (``/``, ``/exists``, ``/create``) answer with files and
redirects; only errors and the health check speak JSON.
"""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Sanitized error body returned for any ``FeedbackServiceError``."""

    error: str
    detail: str


class HealthResponse(BaseModel):
    """Application health check response."""

    status: str
    version: str
    storage: dict[str, bool | str]
