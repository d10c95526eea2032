"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# Values are resolved in priority order:
#
#   1. Environment variables — e.g. FEEDBACK_DIR=/srv/feedback
#   2. .env file in the working directory (local development)
#   3. config/config.yaml, when loaded through ``load_config()``
#   4. The defaults below
#
# Field name ``feedback_dir`` maps to env var ``FEEDBACK_DIR``.
#
# ``feedback_dir`` and ``temp_dir`` are relative to the process working
# directory; ``pages_dir`` and ``styles_dir`` default to the copies that
# ship next to the source tree.
# ──────────────────────────────────────────────────────────────────────
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Feedback service settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Storage ===
    feedback_dir: str = "feedback"
    temp_dir: str = "temp"
    # Off by default: a duplicate submission leaves its staged temp file
    # behind, matching the tutorial's documented behavior.
    cleanup_temp_on_conflict: bool = False

    # === Frontend ===
    pages_dir: str = str(_PROJECT_ROOT / "pages")
    styles_dir: str = str(_PROJECT_ROOT / "styles")

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 80
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def reload_enabled(self) -> bool:
        """Hot reload is on in development only."""
        return self.app_env == "development"

    def get_reload_dirs(self) -> list[str]:
        """Directories uvicorn watches when hot reload is on."""
        return [
            str(_PROJECT_ROOT / "src"),
            self.pages_dir,
            self.styles_dir,
        ]
