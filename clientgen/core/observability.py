"""
Logging for the client generator.

Provides:
- Structured logging with JSON format and a per-run correlation ID
- Plain console logging for interactive use
- Run ID (run_id) generation and propagation

Usage:
    from clientgen.core.observability import (
        configure_logging,
        get_logger,
        set_run_id,
    )
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime

# ============================================================================
# Context Variables for Run Tracking
# ============================================================================

# Correlation ID - links all logs for a single invocation
_run_id_ctx: ContextVar[str] = ContextVar("run_id", default="")

# Target language of the current run
_language_ctx: ContextVar[str] = ContextVar("language", default="")


def generate_run_id() -> str:
    """Generate a unique run ID for correlation."""
    return str(uuid.uuid4())


def get_run_id() -> str:
    """Get the current run ID from context."""
    return _run_id_ctx.get()


def set_run_id(run_id: str) -> None:
    """Set the run ID for the current context."""
    _run_id_ctx.set(run_id)


def get_language() -> str:
    """Get the current target language from context."""
    return _language_ctx.get()


def set_language(language: str) -> None:
    """Set the target language for the current context."""
    _language_ctx.set(language)


# ============================================================================
# Logging Configuration
# ============================================================================

_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)

PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs as JSON with standard fields:
    - timestamp: ISO 8601 format
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - logger: Logger name
    - message: Log message
    - run_id: Correlation ID (if available)
    - language: Target language (if available)
    - extra: Any additional context from logging.extra
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run_id = get_run_id()
        if run_id:
            log_entry["run_id"] = run_id

        language = get_language()
        if language:
            log_entry["language"] = language

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
            }

        # These come from logger.info("msg", extra={"key": "value"})
        extra_keys = {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}
        if extra_keys:
            log_entry["extra"] = extra_keys

        return json.dumps(log_entry, default=str)


def configure_logging(level: str = "INFO", structured: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Emit JSON records instead of plain text
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # StreamHandler defaults to stderr, keeping stdout for the result line
    handler = logging.StreamHandler()
    if structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger."""
    return logging.getLogger(name)
