"""Feedback submission workflow.

# ─── ARCHITECTURE ROLE ───────────────────────────────────────────────
#
# Layer: Services (business logic — depends on interfaces, not providers).
#
# Submission flow for one FeedbackItem:
#
#   1. stage_temp   always, before any uniqueness check
#   2. put          exclusive create of the persisted artifact
#   3a. CREATED     clear_temp, report CREATED
#   3b. CONFLICT    leave the temp file behind (default) or clear it when
#                   ``cleanup_temp_on_conflict`` is on, report DUPLICATE
#
# StorageError from any step propagates to the API layer unchanged.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import structlog

from src.interfaces.feedback_store import IFeedbackStore
from src.models.feedback import FeedbackItem, PutOutcome, SubmissionOutcome
from src.utils.logging import get_logger


class FeedbackService:
    """Runs the stage → put → cleanup workflow against an ``IFeedbackStore``."""

    def __init__(
        self,
        store: IFeedbackStore,
        cleanup_temp_on_conflict: bool = False,
    ) -> None:
        self._store = store
        self._cleanup_temp_on_conflict = cleanup_temp_on_conflict
        self._logger: structlog.BoundLogger = get_logger(__name__)

    @property
    def store(self) -> IFeedbackStore:
        return self._store

    async def submit(self, item: FeedbackItem) -> SubmissionOutcome:
        """Persist *item* unless its title is already taken."""
        await self._store.stage_temp(item.title, item.content)

        outcome = await self._store.put(item.title, item.content)

        if outcome is PutOutcome.CREATED:
            await self._store.clear_temp(item.title)
            self._logger.info(
                "feedback_created",
                title=item.title,
                length=len(item.content),
            )
            return SubmissionOutcome.CREATED

        self._logger.info("feedback_duplicate", title=item.title)
        if self._cleanup_temp_on_conflict:
            await self._store.clear_temp(item.title)
        else:
            self._logger.debug("temp_file_left_behind", title=item.title)
        return SubmissionOutcome.DUPLICATE
