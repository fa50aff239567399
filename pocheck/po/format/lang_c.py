"""C printf-style placeholders, with positional reordering (``%2$s``)."""

from __future__ import annotations

import re

from .base import FormatParser, is_ascii_alpha, marker_next_char

_PERCENT = ord("%")
_FLAGS = frozenset(b"-+ #.$0123456789")
_SINGLE_LENGTH_MODIFIERS = frozenset(b"qLjzZt")
_REORDER_RE = re.compile(r"^%([0-9]+)\$")


class FormatC(FormatParser):
    def next_char(self, data: bytes, pos: int, length: int) -> tuple[int, bool]:
        return marker_next_char(_PERCENT, data, pos, length)

    def find_end_format(self, data: bytes, pos: int, length: int) -> int:
        pos_end = pos
        while pos_end < length and data[pos_end] in _FLAGS:
            pos_end += 1
        if pos_end < length:
            byte = data[pos_end]
            if byte in b"hl":
                pos_end += 1
                # hh / ll
                if pos_end < length and data[pos_end] == byte:
                    pos_end += 1
            elif byte in _SINGLE_LENGTH_MODIFIERS:
                pos_end += 1
        if pos_end < length and is_ascii_alpha(data[pos_end]):
            pos_end += 1
        return pos_end


def fmt_sort_index(placeholder: str) -> float:
    """Return the reordering index of ``%N$...``, or infinity without one."""
    match = _REORDER_RE.match(placeholder)
    if match:
        return int(match.group(1))
    return float("inf")


def fmt_strip_index(placeholder: str) -> str:
    """Remove the reordering index: ``%3$d`` becomes ``%d``."""
    return _REORDER_RE.sub("%", placeholder, count=1)
