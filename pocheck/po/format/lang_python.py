"""Python placeholders: ``%``-style and ``str.format`` brace style."""

from __future__ import annotations

from .base import FormatParser, is_ascii_alpha, marker_next_char

_PERCENT = ord("%")
_OPEN_PAREN = ord("(")
_CLOSE_PAREN = ord(")")
_OPEN_BRACE = ord("{")
_CLOSE_BRACE = ord("}")
_FLAGS = frozenset(b"-+ #.0123456789")
_LENGTH_MODIFIERS = frozenset(b"hlL")


class FormatPython(FormatParser):
    def next_char(self, data: bytes, pos: int, length: int) -> tuple[int, bool]:
        return marker_next_char(_PERCENT, data, pos, length)

    def find_end_format(self, data: bytes, pos: int, length: int) -> int:
        pos_end = pos
        # Mapping key: %(name)s
        if pos_end < length and data[pos_end] == _OPEN_PAREN:
            close = data.find(_CLOSE_PAREN, pos_end, length)
            if close < 0:
                return length
            pos_end = close + 1
        while pos_end < length and data[pos_end] in _FLAGS:
            pos_end += 1
        if pos_end < length and data[pos_end] in _LENGTH_MODIFIERS:
            pos_end += 1
        if pos_end < length and is_ascii_alpha(data[pos_end]):
            pos_end += 1
        return pos_end


class FormatPythonBrace(FormatParser):
    def next_char(self, data: bytes, pos: int, length: int) -> tuple[int, bool]:
        return marker_next_char(_OPEN_BRACE, data, pos, length)

    def find_end_format(self, data: bytes, pos: int, length: int) -> int:
        level = 1
        pos_end = pos
        while pos_end < length:
            byte = data[pos_end]
            pos_end += 1
            if byte == _OPEN_BRACE:
                level += 1
            elif byte == _CLOSE_BRACE:
                level -= 1
                if level <= 0:
                    break
        return pos_end
