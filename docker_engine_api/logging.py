"""
structlog setup for docker-engine-api.

Library modules log through ``get_logger``; nothing is printed until an
application (or the bundled CLI) calls ``setup_logging`` or configures the
standard library logging itself.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

from docker_engine_api.constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_MAX_BYTES

_logging_configured = False

# Shared by setup_logging and get_logger so records render the same either way
_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def reset_logging() -> None:
    """Allow the next setup_logging() call to reconfigure (tests)."""
    global _logging_configured  # noqa: PLW0603
    _logging_configured = False


def _formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer)


def _has_stderr_handler(root: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.StreamHandler) and handler.stream is sys.stderr
        for handler in root.handlers
    )


def setup_logging(
    level: str = "WARNING",
    log_format: str = "text",
    log_file: str | None = None,
    max_bytes: int = DEFAULT_LOG_MAX_BYTES,
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
) -> None:
    """
    Route log records to stderr and, optionally, a rotating file.

    Only the first call has an effect until reset_logging() is called.
    stdout is left alone so command output stays machine readable.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; unknown names mean INFO
        log_format: "json" or "text"
        log_file: Rotating log file path, None for no file
        max_bytes: Size at which the log file is rotated
        backup_count: Rotated files to keep
    """
    global _logging_configured  # noqa: PLW0603
    if _logging_configured:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = _formatter(log_format)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    handlers: list[logging.Handler] = []
    if not _has_stderr_handler(root):
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                path, maxBytes=max_bytes, backupCount=backup_count
            )
        )
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # httpx logs every request at INFO; the transport's own debug line is enough
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> Any:
    """
    Return a structlog logger over the standard library logger ``name``.

    Records go through standard logging whether or not setup_logging ran,
    so applications keep control of levels and handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
