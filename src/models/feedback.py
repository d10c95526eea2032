"""Feedback domain models.

# ─── ARCHITECTURE ROLE ───────────────────────────────────────────────
#
# Layer: Models (bottom of the dependency graph — only utils below it).
#
# A ``FeedbackItem`` lives for exactly one request: it is built from the
# submitted form, staged to ``temp/``, and then either persisted to
# ``feedback/`` or rejected as a duplicate.  Nothing is kept in memory
# between requests; the filesystem is the only shared state.
#
# Two outcome enums keep the layers honest:
#   - ``PutOutcome``        what the store saw (exclusive create result)
#   - ``SubmissionOutcome`` what the service tells the API layer
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.utils.text_normalizer import normalize_title


class PutOutcome(str, Enum):
    """Result of an exclusive create in a feedback store."""

    CREATED = "CREATED"
    CONFLICT = "CONFLICT"


class SubmissionOutcome(str, Enum):
    """Result of a feedback submission as seen by the API layer."""

    CREATED = "CREATED"
    DUPLICATE = "DUPLICATE"


class FeedbackItem(BaseModel):
    """A single feedback submission with its normalized title."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Lowercased, filename-safe title; the item's identity.")
    content: str = Field(default="", description="Free-form feedback text, may be empty.")

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return normalize_title(value)
