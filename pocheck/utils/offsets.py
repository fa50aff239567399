"""Helpers for working with UTF-8 byte offsets inside Python strings.

Spans reported by the rules are byte offsets into the UTF-8 encoding of a
string, so they can be sliced reliably whatever the characters involved.
Display and serialization need character offsets instead.

Functions:
    - utf8_char_len: Length in bytes of the UTF-8 sequence starting with a lead byte
    - byte_len: Length in bytes of a string once encoded as UTF-8
    - byte_to_char_offset: Convert a byte offset to a character offset
    - spans_to_char_offsets: Convert a list of byte spans to character spans
    - find_all: Byte spans of every occurrence of one or more substrings
"""

from __future__ import annotations

from typing import Iterable, Sequence

Span = tuple[int, int]


def utf8_char_len(lead_byte: int) -> int:
    """Return how many bytes the UTF-8 sequence starting with ``lead_byte`` uses."""
    if lead_byte < 0x80:
        return 1
    if lead_byte < 0xE0:
        return 2
    if lead_byte < 0xF0:
        return 3
    return 4


def byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def byte_to_char_offset(text: str, offset: int) -> int:
    """Convert a byte offset into ``text`` to a character offset.

    Offsets falling inside a multi-byte sequence are rounded down to the
    start of that character.
    """
    prefix = text.encode("utf-8")[:offset]
    return len(prefix.decode("utf-8", errors="ignore"))


def spans_to_char_offsets(text: str, spans: Iterable[Span]) -> list[Span]:
    return [
        (byte_to_char_offset(text, start), byte_to_char_offset(text, end))
        for start, end in spans
    ]


def find_all(text: str, needles: str | Sequence[str]) -> list[Span]:
    """Return the byte spans of all non-overlapping occurrences of ``needles``.

    Args:
        text: The string to search
        needles: A substring, or a sequence of substrings matched at the same
            position in order (first match wins)

    Returns:
        Spans sorted by start offset
    """
    if isinstance(needles, str):
        needles = [needles]
    data = text.encode("utf-8")
    encoded = [needle.encode("utf-8") for needle in needles if needle]
    spans: list[Span] = []
    pos = 0
    while pos < len(data):
        for needle in encoded:
            if data.startswith(needle, pos):
                spans.append((pos, pos + len(needle)))
                pos += len(needle)
                break
        else:
            pos += 1
    return spans
