"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog


def _resolve_level(name: str | None = None) -> int:
    level_name = (name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def setup_logging(level: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Configure structlog for copy diagnostics on stderr.

    Per-run context (the destination directory) is bound with
    ``structlog.contextvars`` by the driver and merged into every event.
    """
    log_level = _resolve_level(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=log_level, stream=sys.stderr, format="%(message)s")

    return structlog.get_logger("filecopy")


logger: structlog.typing.FilteringBoundLogger = setup_logging()


def install_exception_hooks() -> None:
    """Report crashes that escape the copy run through structlog, with the run's context."""

    def handle_exception(exc_type, exc_value, exc_traceback):  # type: ignore[no-untyped-def]
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.critical("Copy crashed", error_type=exc_type.__name__, exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception


install_exception_hooks()
