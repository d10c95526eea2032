"""Flat-file feedback store.

Persists each submission as ``<feedback_dir>/<title>.txt`` and stages it
first as ``<temp_dir>/<title>.txt``.  Duplicate detection relies entirely
on opening the final file in exclusive mode (``"x"``, i.e. ``O_EXCL``),
which the OS performs atomically.

Blocking file calls run in worker threads via ``asyncio.to_thread``.  Each
step (open, write/close, unlink) is awaited separately, so requests for
other titles interleave freely between them.
"""

from __future__ import annotations

import asyncio
import contextlib
from pathlib import Path
from typing import IO

import structlog

from src.interfaces.feedback_store import IFeedbackStore
from src.models.feedback import PutOutcome
from src.utils.errors import StorageError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_FEEDBACK_DIR = Path("feedback")
_DEFAULT_TEMP_DIR = Path("temp")

# newline="" disables newline translation so stored text is exactly what
# the client sent (browsers submit textarea content with CRLF).
_OPEN_KWARGS = {"encoding": "utf-8", "newline": ""}


class FileFeedbackStore(IFeedbackStore):
    """Feedback persistence as one text file per title."""

    def __init__(
        self,
        feedback_dir: str | Path = _DEFAULT_FEEDBACK_DIR,
        temp_dir: str | Path = _DEFAULT_TEMP_DIR,
    ) -> None:
        self._feedback_dir = Path(feedback_dir)
        self._temp_dir = Path(temp_dir)

    @property
    def feedback_dir(self) -> Path:
        return self._feedback_dir

    @property
    def temp_dir(self) -> Path:
        return self._temp_dir

    def feedback_path(self, title: str) -> Path:
        return self._feedback_dir / f"{title}.txt"

    def temp_path(self, title: str) -> Path:
        return self._temp_dir / f"{title}.txt"

    async def initialize(self) -> None:
        """Create the feedback and temp directories if they don't exist."""
        try:
            for directory in (self._feedback_dir, self._temp_dir):
                await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("storage_init_failed", error=str(exc))
            raise StorageError("Could not create feedback directories") from exc
        logger.info(
            "feedback_store_initialized",
            feedback_dir=str(self._feedback_dir),
            temp_dir=str(self._temp_dir),
        )

    async def stage_temp(self, title: str, content: str) -> None:
        """Overwrite the temp artifact for *title* with *content*."""
        path = self.temp_path(title)
        try:
            await asyncio.to_thread(_write_file, path, content)
        except OSError as exc:
            logger.error("storage_error", op="stage_temp", path=str(path), error=str(exc))
            raise StorageError() from exc

    async def clear_temp(self, title: str) -> None:
        """Remove the temp artifact for *title*."""
        path = self.temp_path(title)
        try:
            # A concurrent submission of the same title may have removed it.
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as exc:
            logger.error("storage_error", op="clear_temp", path=str(path), error=str(exc))
            raise StorageError() from exc

    async def put(self, title: str, content: str) -> PutOutcome:
        """Exclusively create the persisted artifact for *title*."""
        path = self.feedback_path(title)
        try:
            handle = await asyncio.to_thread(open, path, "x", **_OPEN_KWARGS)
        except FileExistsError:
            return PutOutcome.CONFLICT
        except OSError as exc:
            logger.error("storage_error", op="put", path=str(path), error=str(exc))
            raise StorageError() from exc

        try:
            await asyncio.to_thread(_write_and_close, handle, content)
        except OSError as exc:
            logger.error("storage_error", op="put_write", path=str(path), error=str(exc))
            # Don't leave a truncated artifact claiming the title.
            with contextlib.suppress(OSError):
                await asyncio.to_thread(path.unlink, missing_ok=True)
            raise StorageError() from exc

        return PutOutcome.CREATED

    def is_ready(self) -> bool:
        """True when both storage directories exist."""
        return self._feedback_dir.is_dir() and self._temp_dir.is_dir()

    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this provider."""
        return "file_feedback"


# -- Sync helpers (executed via asyncio.to_thread) -------------------------

def _write_file(path: Path, content: str) -> None:
    with open(path, "w", **_OPEN_KWARGS) as f:
        f.write(content)


def _write_and_close(handle: IO[str], content: str) -> None:
    with handle:
        handle.write(content)
