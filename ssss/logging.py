"""Structured logging setup for ssss."""
from __future__ import annotations

import logging
import os
import sys

import structlog

_DEFAULT_LEVEL = "info"
_LEVEL_ENV = "SSSS_LOG_LEVEL"
_ROOT_LOGGER = "ssss"

logging.getLogger(_ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: str | None = None) -> None:
    """Configure structlog to emit JSON lines on stdout.

    Each line carries ``level``, ``ts``, ``msg`` and ``component`` plus any
    context the caller bound. The level comes from ``level``, then the
    ``SSSS_LOG_LEVEL`` environment variable, then ``info``.

    The library only ever logs counts, lengths, positions and error kinds.
    Secrets, payloads and tokens never reach a log record.
    """

    log_level = (level or os.environ.get(_LEVEL_ENV) or _DEFAULT_LEVEL).lower()
    numeric_level = _level_from_str(log_level)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            _rename_event_to_msg,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None):
    """Return a structlog logger that writes through stdlib ``logging``.

    Records go to ``logging.getLogger(name)``. The ``ssss`` logger carries a
    ``NullHandler``, so until the application configures logging (with
    :func:`configure_logging` or its own handlers) library events go nowhere.
    """
    return structlog.wrap_logger(logging.getLogger(name or _ROOT_LOGGER))


def _component_processor(
    logger: object, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Ensure every log record carries a ``component`` field."""

    if event_dict.get("component") is None:
        event_dict["component"] = getattr(logger, "name", None) or "ssss"
    return event_dict


def _rename_event_to_msg(
    _logger: object, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["configure_logging", "get_logger"]
