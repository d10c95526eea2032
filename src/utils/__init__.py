"""Utility modules for the feedback service.

- **errors** -- Exception hierarchy rooted at FeedbackServiceError; each
  class carries the HTTP status it maps to.
- **logging** -- structlog setup: coloured console output in development,
  structured JSON in production.
- **text_normalizer** -- Title lowercasing and filename-safety checks.
"""

from src.utils.errors import (
    ConfigurationError,
    FeedbackServiceError,
    InvalidSubmissionError,
    InvalidTitleError,
    StorageError,
)
from src.utils.logging import configure_logging, get_logger
from src.utils.text_normalizer import normalize_title

__all__ = [
    "ConfigurationError",
    "FeedbackServiceError",
    "InvalidSubmissionError",
    "InvalidTitleError",
    "StorageError",
    "configure_logging",
    "get_logger",
    "normalize_title",
]
