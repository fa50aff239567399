"""A single string field of a PO entry."""

from __future__ import annotations

from dataclasses import dataclass

from .escape import escape, unescape


@dataclass
class Message:
    """One logical string (``msgctxt``, ``msgid``, ``msgstr[N]``...).

    Continuation lines are already joined into ``value``; the value stays
    escaped until the parser finalizes the entry.
    """

    line_number: int
    value: str = ""

    def append(self, additional: str) -> None:
        self.value += additional

    def escape(self) -> None:
        self.value = escape(self.value)

    def unescape(self) -> None:
        self.value = unescape(self.value)
