"""
Logging setup for ripple.

Routes structlog through the standard library. Applications call
configure_logging() once at startup; the CLI does this from Settings, giving
console lines on stderr (or JSON lines with RIPPLE_LOG_JSON=1).
"""
import logging
import sys
from typing import Optional

import structlog

# Silent until the application configures logging
logging.getLogger("ripple").addHandler(logging.NullHandler())


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    extra_processors: Optional[list] = None,
    cache_loggers: bool = True,
) -> None:
    """
    Configure structlog for the whole process.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON; otherwise human-readable console lines
        extra_processors: Additional structlog processors inserted before rendering
        cache_loggers: Freeze each logger's configuration on first use
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str, **initial_values) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger bound to the given module name.

    Events always go through the stdlib logger of that name, so until an
    application configures logging they reach the NullHandler on "ripple"
    and nothing is printed.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )
