"""
Structured logging for the scoring engine.

Engine modules log through the standard library (``logging.getLogger``);
setup_logging() installs a structlog ProcessorFormatter on the root logger so
those records share one pipeline with structlog loggers: JSON lines in
production, colored console output elsewhere. Fields bound with
log_context() (campaign objective, industry, ...) are merged into every
record emitted inside the block.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from structlog.types import Processor

from creative_science.config.settings import Settings, get_settings
from creative_science.observability.tracing import add_trace_context

# Handler installed by setup_logging(); replaced on repeated calls
_handler: logging.Handler | None = None


def _shared_processors(settings: Settings) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.tracing_enabled:
        processors.append(add_trace_context)
    return processors


def _renderers(settings: Settings) -> list[Processor]:
    if settings.is_production:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(level: str | None = None) -> None:
    """
    Configure structlog and route standard-library records through it.

    Safe to call more than once; the previously installed handler is
    replaced rather than duplicated. Logs go to stderr so command output
    on stdout stays machine-readable.

    Args:
        level: Log level override (default from settings)
    """
    global _handler
    settings = get_settings()
    shared = _shared_processors(settings)

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderers(settings),
            ],
        )
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(level or settings.log_level)
    _handler = handler

    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger wired to the same handler."""
    return structlog.get_logger(name)


@contextmanager
def log_context(**fields) -> Iterator[None]:
    """
    Bind fields to every log record emitted inside the block.

    None values are skipped, and bindings are restored on exit, so nested
    or concurrent analyses do not leak context into each other.

    Usage:
        with log_context(objective="conversion", industry="beauty"):
            service.analyze_all(input)
    """
    bound = {key: value for key, value in fields.items() if value is not None}
    with structlog.contextvars.bound_contextvars(**bound):
        yield
