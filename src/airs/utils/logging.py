"""Structured logging configuration for AIRS.

Uses structlog processors on top of stdlib logging so existing
``logging.getLogger(__name__)`` calls continue to work transparently.
Supports console, JSON, and file output modes.
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_json: bool = False,
) -> None:
    """Configure structured logging for the library and CLI.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to a log file. ``None`` disables file logging.
        log_json: If True, render log lines as JSON instead of human-readable.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handlers: list[logging.Handler] = []

    # stderr keeps CLI output on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    handlers.append(console_handler)

    if log_file is not None:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(file_path), encoding="utf-8")
        file_handler.setLevel(numeric_level)
        handlers.append(file_handler)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stdlib records get level, logger name and bound context here
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    for h in handlers:
        h.setFormatter(formatter)

    root = logging.getLogger("airs")
    for h in list(root.handlers):
        h.close()
    root.handlers.clear()
    root.setLevel(numeric_level)
    for h in handlers:
        root.addHandler(h)
    root.propagate = False


@contextmanager
def session_context(session_id: str | None = None, **fields: Any) -> Iterator[str]:
    """Bind a history session's id and *fields* to every log line in the block.

    Yields the session id (a short random hex id when not given).
    """
    session_id = session_id or uuid.uuid4().hex[:8]
    with structlog.contextvars.bound_contextvars(session=session_id, **fields):
        yield session_id
