"""Unit tests for the feedback domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models.feedback import FeedbackItem, PutOutcome, SubmissionOutcome
from src.utils.errors import InvalidTitleError


class TestFeedbackItem:
    def test_title_is_normalized(self) -> None:
        item = FeedbackItem(title="Hello", content="world")
        assert item.title == "hello"
        assert item.content == "world"

    def test_content_defaults_to_empty(self) -> None:
        assert FeedbackItem(title="empty").content == ""

    def test_unsafe_title_raises_domain_error(self) -> None:
        # The validator's own exception type surfaces, not a ValidationError,
        # so the API layer can map it straight to a 400.
        with pytest.raises(InvalidTitleError):
            FeedbackItem(title="../../etc/passwd")

    def test_frozen(self) -> None:
        item = FeedbackItem(title="hello", content="world")
        with pytest.raises(ValidationError):
            item.content = "changed"  # type: ignore[misc]


class TestOutcomes:
    def test_string_values(self) -> None:
        assert PutOutcome.CREATED == "CREATED"
        assert PutOutcome.CONFLICT == "CONFLICT"
        assert SubmissionOutcome.DUPLICATE.value == "DUPLICATE"
