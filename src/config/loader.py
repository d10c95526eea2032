"""YAML configuration loader with environment variable overrides.

# ─── CONFIGURATION HIERARCHY ──────────────────────────────────────────
#
# Configuration is loaded in layers (later layers override earlier):
#
#   1. Settings defaults   — declared on the Settings class
#   2. config/config.yaml  — static defaults checked into the repo
#   3. .env / env vars     — local or deploy-time overrides
#
# The YAML file is grouped into sections; _YAML_FIELD_MAP flattens
# ``section.key`` onto Settings field names:
#
#   storage:
#     feedback_dir: feedback     ->  Settings.feedback_dir
# ──────────────────────────────────────────────────────────────────────
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.config.settings import Settings
from src.utils.errors import ConfigurationError

_YAML_FIELD_MAP: dict[tuple[str, str], str] = {
    ("app", "host"): "app_host",
    ("app", "port"): "app_port",
    ("app", "env"): "app_env",
    ("storage", "feedback_dir"): "feedback_dir",
    ("storage", "temp_dir"): "temp_dir",
    ("storage", "cleanup_temp_on_conflict"): "cleanup_temp_on_conflict",
    ("frontend", "pages_dir"): "pages_dir",
    ("frontend", "styles_dir"): "styles_dir",
    ("logging", "level"): "log_level",
}


def load_config(path: str = "config/config.yaml") -> Settings:
    """Load YAML config and layer environment-based Settings on top.

    Environment variables (and .env) win over YAML values; YAML wins over
    the defaults declared on :class:`Settings`.

    Args:
        path: Path to the YAML configuration file.  A missing file is the
            same as an empty one.

    Returns:
        Fully resolved Settings.

    Raises:
        ConfigurationError: The YAML is malformed or holds invalid values.
    """
    config_path = Path(path)
    yaml_config: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Malformed config file: {config_path}") from exc

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(f"Config file must hold a mapping: {config_path}")

    yaml_values = _flatten(yaml_config)

    try:
        env_settings = Settings()
        # model_fields_set holds only fields that came from env/.env, not
        # from class defaults, so these are the values YAML must not touch.
        env_values = {
            name: getattr(env_settings, name) for name in env_settings.model_fields_set
        }
        return Settings(**{**yaml_values, **env_values})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def _flatten(yaml_config: dict[str, Any]) -> dict[str, Any]:
    """Map sectioned YAML keys onto Settings field names, ignoring unknowns."""
    values: dict[str, Any] = {}
    for (section, key), field_name in _YAML_FIELD_MAP.items():
        section_values = yaml_config.get(section)
        if isinstance(section_values, dict) and key in section_values:
            values[field_name] = section_values[key]
    return values
