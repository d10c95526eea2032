"""Structured logging setup using structlog.

Logging follows the service's ``Settings``:

- ``log_level`` filters structlog events and the stdlib root logger.
- ``app_env == "production"`` selects JSON lines; any other environment
  gets coloured console output.
- every event carries ``app_env``, so mixed logs from a development and a
  production process stay distinguishable.

Standard-library ``logging`` is routed through the same formatter so that
uvicorn's own messages (startup, reloader restarts) look like ours.
uvicorn's access log is silenced because ``RequestLoggingMiddleware``
already logs every request with its duration.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from src.config.settings import Settings

_DEFAULT_LEVEL = "INFO"
_DEFAULT_ENV = "development"


def _bind_app_env(app_env: str) -> structlog.types.Processor:
    def processor(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("app_env", app_env)
        return event_dict

    return processor


def configure_logging(settings: Settings | None = None) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger from *settings*.

    Args:
        settings: Service settings.  ``None`` (first ``get_logger`` call
            before startup) means INFO-level console output.

    Returns:
        A configured structlog BoundLogger.
    """
    log_level = (settings.log_level if settings else _DEFAULT_LEVEL).upper()
    app_env = settings.app_env if settings else _DEFAULT_ENV

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _bind_app_env(app_env),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer: structlog.types.Processor
    if app_env == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # uvicorn installs its own handlers; defer to the root one instead.
    for name in ("uvicorn", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
    logging.getLogger("uvicorn.access").disabled = True

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a named structlog logger, configuring defaults on first use."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
