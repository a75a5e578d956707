"""Logging for wirectl.

Every module logs through ``logging.getLogger(__name__)``; one handler on
the root logger renders those records with structlog, on stderr so
stdout carries nothing but command results. ``--verbose`` opens the
``wirectl`` tree to DEBUG (store load and save, links, exports);
third-party loggers stay at WARNING either way.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "wirectl"


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Replace the root handlers with a single structlog-formatted one.

    Safe to call once per command; earlier handlers are dropped.

    Args:
        verbose: DEBUG for the ``wirectl`` logger tree. When False, WARNING+.
        log_json: One JSON object per line instead of console lines.
        stream: Where to write; stderr by default.

    Returns:
        The installed handler.
    """
    stream = stream or sys.stderr
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json, stream),
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
