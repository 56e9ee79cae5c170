"""
Logging configuration for programs using the tree engine.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging.

    Args:
        level: Log level name or number. Defaults to the LOG_LEVEL
            environment variable, or INFO if unset.
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=LOG_FORMAT)
