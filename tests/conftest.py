"""Shared pytest fixtures for the feedback service test suite."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.config.settings import Settings
from src.interfaces.feedback_store import IFeedbackStore
from src.models.feedback import PutOutcome
from src.providers.feedback.file_feedback_store import FileFeedbackStore
from src.services.feedback_service import FeedbackService


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def feedback_dir(tmp_path: Path) -> Path:
    return tmp_path / "feedback"


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    return tmp_path / "temp"


@pytest.fixture
def test_settings(feedback_dir: Path, temp_dir: Path, project_root: Path) -> Settings:
    """Settings pointing storage at a per-test directory."""
    return Settings(
        feedback_dir=str(feedback_dir),
        temp_dir=str(temp_dir),
        pages_dir=str(project_root / "pages"),
        styles_dir=str(project_root / "styles"),
        cleanup_temp_on_conflict=False,
        app_env="test",
    )


@pytest.fixture
async def file_store(feedback_dir: Path, temp_dir: Path) -> FileFeedbackStore:
    """An initialized FileFeedbackStore in a temporary directory."""
    store = FileFeedbackStore(feedback_dir=feedback_dir, temp_dir=temp_dir)
    await store.initialize()
    return store


@pytest.fixture
def mock_store() -> IFeedbackStore:
    """Mock IFeedbackStore whose put() reports CREATED by default.

    Override with ``mock_store.put.return_value = PutOutcome.CONFLICT`` or
    ``mock_store.put.side_effect = StorageError()`` for specific tests.
    """
    mock = MagicMock(spec=IFeedbackStore)
    mock.get_provider_name.return_value = "mock-store"
    mock.is_ready.return_value = True
    mock.initialize = AsyncMock(return_value=None)
    mock.stage_temp = AsyncMock(return_value=None)
    mock.clear_temp = AsyncMock(return_value=None)
    mock.put = AsyncMock(return_value=PutOutcome.CREATED)
    return mock


@pytest.fixture
def client(test_settings: Settings):
    """TestClient for an app backed by a real FileFeedbackStore in tmp_path."""
    from src.main import create_app

    app = create_app(app_settings=test_settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_client(test_settings: Settings):
    """Factory for TestClients with overridden settings or components."""
    from src.main import create_app

    clients: list[TestClient] = []

    def _make(
        components: dict | None = None,
        **overrides,
    ) -> TestClient:
        settings = test_settings.model_copy(update=overrides)
        c = TestClient(create_app(app_settings=settings, components=components))
        c.__enter__()
        clients.append(c)
        return c

    yield _make

    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture
def service_with(mock_store: IFeedbackStore):
    """Build a FeedbackService around the mock store."""

    def _make(cleanup_temp_on_conflict: bool = False) -> FeedbackService:
        return FeedbackService(
            store=mock_store,
            cleanup_temp_on_conflict=cleanup_temp_on_conflict,
        )

    return _make
