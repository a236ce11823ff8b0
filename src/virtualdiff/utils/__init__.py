"""Utility helpers."""

from virtualdiff.utils.constants import GRAVITY, KMH_PER_MS, SMALL_EPS
from virtualdiff.utils.logging import configure_logging

__all__ = ["GRAVITY", "KMH_PER_MS", "SMALL_EPS", "configure_logging"]
