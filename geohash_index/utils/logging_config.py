"""
Structured logging for geohash-index using structlog.

Console rendering is the default for interactive use of the command
line; JSON rendering suits log shipping. Everything goes to stderr so
that the JSON documents the runner prints on stdout stay parseable.
"""
import sys
import logging
import structlog
from pathlib import Path
from typing import List, Optional

from geohash_index.utils.exceptions import ConfigurationError


def _processors(json_output: bool) -> List:
    """Processor chain shared by every logger, ending in a renderer."""
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def _attach_file(log_file: Path, level: int) -> None:
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.getLogger().addHandler(handler)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    json_output: bool = False
):
    """
    Route geohash-index logs through structlog and the stdlib root logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (any case)
        log_file: Also append rendered lines to this file; parents are created
        json_output: Render JSON instead of console lines

    Raises:
        ConfigurationError: If log_level is not a known level

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> get_logger("geohash_index.core.hash_circle").debug("circle_expanded", precision=6)
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {log_level}")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    # basicConfig is a no-op once handlers exist, so set the level directly too
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if log_file:
        _attach_file(log_file, level)


def get_logger(name: str):
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)
