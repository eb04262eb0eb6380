"""structlog setup for the hub process."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from airdrop_hub.core.config import Settings, get_settings

_CONFIGURED = False

# Keys whose values never reach the log stream.
SECRET_KEYS = frozenset({"secret", "stored_secret", "admin_secret", "password"})
REDACTED = "***"


def resolve_level(name: str) -> int:
    """Map a ``LOG_LEVEL`` value to a logging level, defaulting to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def redact_secrets(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def service_context(settings: Settings) -> Processor:
    """Stamp every event with the service name and environment."""

    def processor(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", settings.app_name)
        event_dict.setdefault("environment", settings.environment)
        return event_dict

    return processor


def setup_logging(settings: Settings | None = None) -> None:
    """Configure JSON logs once per process, filtered at ``settings.log_level``."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    settings = settings or get_settings()
    level = resolve_level(settings.log_level)

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        service_context(settings),
        redact_secrets,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True
