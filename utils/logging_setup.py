"""
utils/logging_setup.py
----------------------

Central logging configuration for the morphology engine and its API.

Engine modules log structured events through structlog:

      import structlog
      logger = structlog.get_logger(__name__)
      logger.debug("rule_not_applied", rule_id="r1", reason="gate rejected")

This module wires those events into the standard `logging` machinery once,
so that they share level, handlers and format with everything else.

Environment overrides:
      MORPH_LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
      MORPH_LOG_FILE    (path to a log file; if unset, log to stderr only)

Usage
=====

In a CLI or app entry point:

    from utils.logging_setup import init_logging

    init_logging()                 # idempotent
    init_logging(fmt="json")       # one JSON object per line

Anywhere else:

    from utils.logging_setup import get_logger

    log = get_logger(__name__)
    log.info("paradigm_exported", words=120)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import structlog

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_env_log_level() -> int:
    """
    Read MORPH_LOG_LEVEL from environment and map it to a logging level.
    Defaults to logging.INFO if unset or invalid.
    """
    level_name = os.getenv("MORPH_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _renderer(fmt: str):
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def init_logging(
    level: Optional[int] = None,
    fmt: str = "console",
    filename: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize stdlib logging and structlog.

    Args:
        level:
            Logging level (e.g. logging.DEBUG). If None, it is read from
            the MORPH_LOG_LEVEL environment variable, defaulting to INFO.
        fmt:
            "console" for human-readable lines, "json" for JSON lines.
        filename:
            Optional log file, in addition to stderr. MORPH_LOG_FILE wins
            when set.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    if level is None:
        level = _get_env_log_level()

    filename = os.getenv("MORPH_LOG_FILE") or filename

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_renderer(fmt),
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt=DEFAULT_DATE_FORMAT),
        ],
    )

    handlers = [logging.StreamHandler()]
    if filename:
        handlers.append(logging.FileHandler(filename, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt=DEFAULT_DATE_FORMAT),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _INITIALIZED = True


def get_logger(name: str):
    """
    Get a structlog logger bound to `name`, initializing logging with
    default settings on first use.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
