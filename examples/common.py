"""Shared helpers for example scripts."""

from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    """Return project root path for scripts located in ``examples``.

    Returns:
        Project root directory path.
    """
    return Path(__file__).resolve().parents[1]


def example_output_root() -> Path:
    """Return canonical examples output root.

    Returns:
        Path to ``examples/output``.
    """
    return project_root() / "examples" / "output"
