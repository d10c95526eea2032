"""Feedback domain models — re-exports the public model classes.

Import from ``src.models`` rather than the submodule:

    from src.models import FeedbackItem, SubmissionOutcome
"""

from __future__ import annotations

from src.models.feedback import FeedbackItem, PutOutcome, SubmissionOutcome

__all__ = [
    "FeedbackItem",
    "PutOutcome",
    "SubmissionOutcome",
]
