"""Consistency linter for gettext PO catalogs."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "checker",
    "cli",
    "models",
    "po",
    "rules",
    "utils",
]
