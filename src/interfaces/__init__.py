"""Public interface definitions for storage providers.

The feedback service talks to storage only through ``IFeedbackStore``;
the concrete adapter is chosen in ``src/main.py`` and tests can inject a
mock or an alternative implementation.

CONCRETE PROVIDER MAP:
    Interface        →  Concrete implementations (in src/providers/)
    ─────────────────────────────────────────────────────────────────
    IFeedbackStore   →  FileFeedbackStore
"""

from src.interfaces.feedback_store import IFeedbackStore

__all__ = [
    "IFeedbackStore",
]
