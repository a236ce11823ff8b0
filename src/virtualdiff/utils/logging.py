"""Logging helpers for library users and examples."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure a minimal logging setup for examples and scripts.

    Args:
        level: Root logger level, e.g. ``logging.INFO``.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
