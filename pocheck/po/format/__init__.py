"""Format string recognition: languages and placeholder-aware scanners."""

from __future__ import annotations

from .base import FormatParser, MatchStrPos
from .lang_c import fmt_sort_index, fmt_strip_index
from .language import Language
from .scanners import CharPos, FormatPos, WordPos

__all__ = [
    "CharPos",
    "FormatParser",
    "FormatPos",
    "Language",
    "MatchStrPos",
    "WordPos",
    "fmt_sort_index",
    "fmt_strip_index",
]
