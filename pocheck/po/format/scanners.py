"""Lazy scanners over a string, built on a format language.

Each scanner walks the UTF-8 bytes of the string with a cursor and yields
:class:`MatchStrPos` values carrying byte spans:

- :class:`FormatPos` yields the placeholders only;
- :class:`WordPos` yields words (alphanumeric characters, with hyphens
  allowed after the first character), skipping placeholders;
- :class:`CharPos` yields single alphanumeric or hyphen characters,
  skipping placeholders.

Scanners are finite and cannot be rewound: build a new one to start over.
"""

from __future__ import annotations

from typing import Iterator

from ...utils.offsets import utf8_char_len
from .base import FormatParser, MatchStrPos
from .language import Language


class _Scanner(Iterator[MatchStrPos]):
    def __init__(self, s: str, language: Language) -> None:
        self._data = s.encode("utf-8")
        self._len = len(self._data)
        self._pos = 0
        self._fmt: FormatParser = language.format_parser()

    def __iter__(self) -> "_Scanner":
        return self

    def _char_at(self, pos: int) -> str:
        return self._data[pos : pos + utf8_char_len(self._data[pos])].decode("utf-8")

    def _match(self, start: int, end: int) -> MatchStrPos:
        return MatchStrPos(self._data[start:end].decode("utf-8"), start, end)


class FormatPos(_Scanner):
    def __next__(self) -> MatchStrPos:
        while self._pos < self._len:
            start = self._pos
            self._pos, is_format = self._fmt.next_char(self._data, self._pos, self._len)
            if self._pos >= self._len:
                break
            if is_format:
                self._pos = self._fmt.find_end_format(self._data, self._pos, self._len)
                return self._match(start, self._pos)
            self._pos += utf8_char_len(self._data[self._pos])
        raise StopIteration


class WordPos(_Scanner):
    def __next__(self) -> MatchStrPos:
        start: int | None = None
        end = 0
        while self._pos < self._len:
            if start is None:
                self._pos, is_format = self._fmt.next_char(self._data, self._pos, self._len)
                if self._pos >= self._len:
                    break
                if is_format:
                    self._pos = self._fmt.find_end_format(self._data, self._pos, self._len)
                    continue
            char = self._char_at(self._pos)
            if char.isalnum() or (start is not None and char == "-"):
                if start is None:
                    start = self._pos
                end = self._pos + len(char.encode("utf-8"))
            elif start is not None:
                break
            self._pos += utf8_char_len(self._data[self._pos])
        if start is None:
            raise StopIteration
        return self._match(start, end)


class CharPos(_Scanner):
    def __next__(self) -> MatchStrPos:
        while self._pos < self._len:
            self._pos, is_format = self._fmt.next_char(self._data, self._pos, self._len)
            if self._pos >= self._len:
                break
            if is_format:
                self._pos = self._fmt.find_end_format(self._data, self._pos, self._len)
                continue
            char = self._char_at(self._pos)
            start = self._pos
            self._pos += utf8_char_len(self._data[self._pos])
            if char.isalnum() or char == "-":
                return self._match(start, self._pos)
        raise StopIteration
