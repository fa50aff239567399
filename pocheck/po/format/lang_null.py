"""Format language for strings without placeholders."""

from __future__ import annotations

from .base import FormatParser


class FormatNull(FormatParser):
    """Never starts a placeholder."""
