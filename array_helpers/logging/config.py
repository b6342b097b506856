"""
Centralized logging configuration for the array helpers.

This module configures structlog on top of the standard library logging
module. Library modules obtain their loggers with ``structlog.get_logger``
and never configure output themselves; applications call
``configure_logging`` once at startup.
"""
import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..config.defaults import LoggingParams


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> list:
    """
    Assemble the structlog processor chain, renderer last.

    Args:
        format_json: Render JSON instead of colored console output
        include_timestamp: Add an ISO timestamp to every event
        include_caller: Add the calling file name and line number
        extra_processors: Processors inserted just before the renderer
    """
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    processors.extend(extra_processors or [])

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Logging level name, case-insensitive
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        stream=sys.stdout,
        format="%(message)s"  # rendering happens in structlog
    )

    structlog.configure(
        processors=build_processors(format_json, include_timestamp, include_caller, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_params(params: "LoggingParams") -> None:
    """Configure logging from the ``logging`` section of loaded settings."""
    configure_logging(level=params.level, format_json=params.format_json)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)
