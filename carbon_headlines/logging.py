from __future__ import annotations

import logging
import sys
from typing import Any, Dict

import structlog


# stdout carries the JSON payload; diagnostics never go there.
_LEVEL_PREFIX = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARN",
    "warn": "WARN",
    "error": "ERROR",
    "critical": "ERROR",
}

_configured = False


def _render_line(_: Any, method_name: str, event_dict: Dict[str, Any]) -> str:
    level = str(event_dict.pop("level", method_name)).lower()
    prefix = _LEVEL_PREFIX.get(level, level.upper())
    event = event_dict.pop("event", "")
    exc = event_dict.pop("exception", None)
    line = f"{prefix}: {event}"
    extras = " ".join(f"{k}={v}" for k, v in event_dict.items())
    if extras:
        line = f"{line} {extras}"
    if exc:
        line = f"{line}\n{exc}"
    return line


def configure_logging(*, level: int = logging.INFO) -> None:
    """
    Route structlog output to stderr as `LEVEL: event key=value` lines.
    """
    global _configured

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _render_line,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(**initial_values: Any) -> structlog.BoundLogger:
    # unconfigured structlog prints to stdout, which carries the JSON payload
    if not _configured:
        configure_logging()
    return structlog.get_logger(**initial_values)
