"""Concurrency tests: many simultaneous submissions of one title.

Submissions run on one event loop through the real FileFeedbackStore, so
their filesystem steps interleave the way concurrent requests would.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import pytest

from src.models.feedback import FeedbackItem, SubmissionOutcome
from src.providers.feedback.file_feedback_store import FileFeedbackStore
from src.services.feedback_service import FeedbackService


@pytest.mark.asyncio
async def test_exactly_one_submission_wins(
    file_store: FileFeedbackStore, feedback_dir: Path
) -> None:
    service = FeedbackService(store=file_store)
    items = [FeedbackItem(title="Race", content=f"body {i}") for i in range(30)]

    outcomes = await asyncio.gather(*(service.submit(item) for item in items))

    winners = [i for i, o in enumerate(outcomes) if o is SubmissionOutcome.CREATED]
    assert len(winners) == 1
    assert outcomes.count(SubmissionOutcome.DUPLICATE) == len(items) - 1
    # The stored file is one complete body, never a mix.
    assert (feedback_dir / "race.txt").read_text(encoding="utf-8") == items[winners[0]].content


@pytest.mark.asyncio
async def test_mixed_case_race(file_store: FileFeedbackStore, feedback_dir: Path) -> None:
    service = FeedbackService(store=file_store)
    titles = ["hello", "HELLO", "Hello", "hElLo"]

    outcomes = await asyncio.gather(
        *(service.submit(FeedbackItem(title=t, content=t)) for t in titles)
    )

    assert outcomes.count(SubmissionOutcome.CREATED) == 1
    assert [p.name for p in feedback_dir.iterdir()] == ["hello.txt"]


@pytest.mark.asyncio
async def test_distinct_titles_all_succeed(
    file_store: FileFeedbackStore, feedback_dir: Path
) -> None:
    service = FeedbackService(store=file_store)

    outcomes = await asyncio.gather(
        *(service.submit(FeedbackItem(title=f"t{i}", content=str(i))) for i in range(10))
    )

    assert set(outcomes) == {SubmissionOutcome.CREATED}
    assert len(list(feedback_dir.iterdir())) == 10


@pytest.mark.asyncio
async def test_concurrent_http_requests(test_settings, file_store: FileFeedbackStore) -> None:
    """Same race through the ASGI app, with state wired by hand."""
    from src.main import create_app

    app = create_app(app_settings=test_settings)
    # ASGITransport does not run the lifespan.
    app.state.feedback_service = FeedbackService(store=file_store)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        responses = await asyncio.gather(
            *(
                ac.post("/create", data={"title": "same", "text": f"{i}"})
                for i in range(12)
            )
        )

    locations = [r.headers["location"] for r in responses]
    assert all(r.status_code == 302 for r in responses)
    assert locations.count("/") == 1
    assert locations.count("/exists") == 11
