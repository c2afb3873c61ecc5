"""Logging setup for the search bar.

Classification failures are logged at DEBUG with the pipeline's failure
``code`` (arithmetic) or rejection ``reason`` (address) passed through
``extra=``; ``ClassificationFormatter`` renders them as ``key=value`` fields.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

# Record attributes rendered as trailing key=value fields, in this order
STRUCTURED_FIELDS = ("code", "reason", "engine")


class ClassificationFormatter(logging.Formatter):
    """One line per record: timestamp, level, logger, message, then structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        fields = [
            f"{name}={getattr(record, name)}"
            for name in STRUCTURED_FIELDS
            if getattr(record, name, None) is not None
        ]
        if fields:
            line += " | " + " ".join(fields)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``searchbar`` logger.

    Args:
        level: Logging level name; unknown names fall back to WARNING
        log_file: Optional file to write logs to, in addition to stderr
    """
    logger = logging.getLogger("searchbar")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(ClassificationFormatter())
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a searchbar module, e.g. ``get_logger("url")`` -> ``searchbar.url``."""
    return logging.getLogger(f"searchbar.{name}")
