"""
Logging utilities for the FastAPI application and the admin scripts.

Provides a consistent logging format and configuration.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with a sensible default format."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    # botocore is chatty at DEBUG; keep it at WARNING unless asked otherwise.
    if level.upper() != "DEBUG":
        logging.getLogger("botocore").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
