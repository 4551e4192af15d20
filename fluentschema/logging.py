"""Structured Logging for fluentschema

The library only emits events (debug for traversal and rejected values,
info for compile/parse/marshal summaries). Nothing is rendered until the
application calls ``configure_logging()``, which attaches a handler to the
``fluentschema`` stdlib logger only and leaves the root logger alone.

Usage:
    from fluentschema.logging import configure_logging, log_context

    configure_logging(level="DEBUG", json_logs=True)
    with log_context(request_id="abc"):
        ensure(order)
"""
import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import structlog
from structlog.types import EventDict, Processor

LIBRARY = "fluentschema"

# No output until configure_logging() replaces this handler.
logging.getLogger(LIBRARY).addHandler(logging.NullHandler())


def _tag_library(_: logging.Logger, __: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("library", LIBRARY)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors run for both structlog and foreign (stdlib) records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _tag_library,
    ]


def _renderer(json_logs: bool) -> Processor:
    if json_logs: return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Route library events to stdout.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; unknown names fall back
            to INFO. Defaults to settings.LOG_LEVEL.
        json_logs: JSON lines instead of console output. Defaults to settings.LOG_JSON.
    """
    from fluentschema.config import settings

    level_name = (level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json_logs is None else json_logs
    shared = get_shared_processors()

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level, *shared, structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _renderer(use_json)]))

    library_logger = logging.getLogger(LIBRARY)
    library_logger.handlers = [handler]
    library_logger.setLevel(getattr(logging, level_name, logging.INFO))
    library_logger.propagate = False


def get_logger(name: str = LIBRARY) -> structlog.stdlib.BoundLogger:
    """Structlog logger over the stdlib logger ``name``.

    Events go through stdlib level filtering and handlers, so they stay silent
    until ``configure_logging()`` gives the library logger a level and handler.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def bind_context(**values) -> None:
    """Attach key/values to every event emitted from the current context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


@contextmanager
def log_context(**values) -> Iterator[None]:
    """Bind ``values`` for the duration of the block only."""
    with structlog.contextvars.bound_contextvars(**values):
        yield


class LoggerRegistry:
    """One logger per library domain (``fluentschema.<domain>``)."""

    _by_domain: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, domain: str) -> structlog.stdlib.BoundLogger:
        return cls._by_domain.setdefault(domain, get_logger(f"{LIBRARY}.{domain}"))


def schema_logger() -> structlog.stdlib.BoundLogger:
    """Decode and assignment events."""
    return LoggerRegistry.get("schema")


def ensure_logger() -> structlog.stdlib.BoundLogger:
    return LoggerRegistry.get("ensure")


def compiler_logger() -> structlog.stdlib.BoundLogger:
    return LoggerRegistry.get("compiler")


def binding_logger() -> structlog.stdlib.BoundLogger:
    """parse / safe_marshal events."""
    return LoggerRegistry.get("binding")
