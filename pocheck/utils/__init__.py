"""Utility modules shared by the parser, the rules and the reports."""

from __future__ import annotations

from . import offsets

__all__ = [
    "offsets",
]
