"""Abstract base class for feedback storage providers.

Defines the contract the feedback service relies on: a staging area for
temporary artifacts and an exclusive-create ``put`` for persisted ones.
The exclusive create is the only duplicate-detection and concurrency
mechanism in the system, so every implementation must guarantee that for
one title at most one ``put`` ever returns ``PutOutcome.CREATED``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.models.feedback import PutOutcome


class IFeedbackStore(ABC):
    """Contract for feedback persistence services.

    Titles passed in are already normalized (see ``normalize_title``).
    All operations are async so the event loop keeps serving other
    requests while storage I/O is pending.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Create storage locations if they don't exist.  Called at startup."""

    @abstractmethod
    async def stage_temp(self, title: str, content: str) -> None:
        """Write *content* to the temporary artifact for *title*.

        Overwrites any earlier staging write for the same title.  Not used
        for conflict detection.
        """

    @abstractmethod
    async def clear_temp(self, title: str) -> None:
        """Delete the temporary artifact for *title*; absent is not an error."""

    @abstractmethod
    async def put(self, title: str, content: str) -> PutOutcome:
        """Persist *content* under *title* only if nothing is stored there yet.

        Returns
        -------
        PutOutcome
            ``CREATED`` when this call created the artifact, ``CONFLICT``
            when one already existed (the existing artifact is untouched).

        Raises
        ------
        StorageError
            Any other storage failure.
        """

    @abstractmethod
    def is_ready(self) -> bool:
        """Return True when the store can accept writes (health checks)."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this provider."""
