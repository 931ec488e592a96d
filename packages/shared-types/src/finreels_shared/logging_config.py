"""Shared logging format and configuration for the reels API and scripts."""

import logging
import time

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"

# boto internals log every request at DEBUG/INFO
_NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "s3transfer")


def resolve_level(level: int | str) -> int:
    """Map a level name (e.g. "debug", "INFO") or number to a logging level; unknown names map to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure the root logger for this process. Call once at application startup."""
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    # Timestamps carry a Z suffix, so render them in UTC
    for handler in logging.getLogger().handlers:
        if handler.formatter is not None:
            handler.formatter.converter = time.gmtime
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
