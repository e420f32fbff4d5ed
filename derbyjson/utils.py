"""Logging setup."""

import logging
import sys

import structlog


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    # Looked up per call so a swapped sys.stderr is honored.
    return structlog.PrintLogger(file=sys.stderr)


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog for console or JSON output.

    Args:
        level: Minimum log level name (DEBUG, INFO, WARNING, ...)
        json_output: Render one JSON object per line instead of console text
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
