"""Contract shared by the format string recognizers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchStrPos:
    """A substring found by a scanner, with its byte span in the source string."""

    s: str
    start: int
    end: int


class FormatParser:
    """Recognize the placeholders of one format language.

    Both methods work on the UTF-8 bytes of the string; ``length`` is the
    number of bytes.
    """

    def next_char(self, data: bytes, pos: int, length: int) -> tuple[int, bool]:
        """Return the position to continue from and whether a placeholder starts.

        When a placeholder starts, the returned position is just after its
        marker and :meth:`find_end_format` gives its end.
        """
        return pos, False

    def find_end_format(self, data: bytes, pos: int, length: int) -> int:
        """Return the exclusive end of the placeholder whose marker ends at ``pos``."""
        return length


def marker_next_char(marker: int, data: bytes, pos: int, length: int) -> tuple[int, bool]:
    # A doubled marker is an escaped literal, not a placeholder.
    if pos + 1 >= length or data[pos] != marker:
        return pos, False
    return pos + 1, data[pos + 1] != marker


def is_ascii_alpha(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A
