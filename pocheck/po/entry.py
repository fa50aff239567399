"""In-memory representation of one PO catalog record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .escape import escape
from .format.language import Language
from .message import Message


@dataclass
class Entry:
    """A translatable unit parsed from a catalog.

    ``msgstr`` maps the plural index to its translation and is iterated in
    ascending index order.
    """

    line_number: int
    keywords: list[str] = field(default_factory=list)
    fuzzy: bool = False
    obsolete: bool = False
    noqa: bool = False
    noqa_rules: set[str] = field(default_factory=set)
    nowrap: bool = False
    format_language: Language = Language.NULL
    encoding_error: bool = False
    msgctxt: Message | None = None
    msgid: Message | None = None
    msgid_plural: Message | None = None
    msgstr: dict[int, Message] = field(default_factory=dict)

    def is_header(self) -> bool:
        return self.msgid is not None and self.msgid.value == ""

    def has_plural_form(self) -> bool:
        return self.msgid_plural is not None

    def is_translated(self) -> bool:
        return any(msg.value for msg in self.msgstr.values())

    def iter_strs(self) -> Iterator[tuple[int, Message]]:
        for idx in sorted(self.msgstr):
            yield idx, self.msgstr[idx]

    def iter_contiguous_strs(self) -> Iterator[tuple[int, Message]]:
        """Yield translations from index 0 up to the first missing index."""
        idx = 0
        while idx in self.msgstr:
            yield idx, self.msgstr[idx]
            idx += 1

    def has_contiguous_msgstr(self) -> bool:
        return sorted(self.msgstr) == list(range(len(self.msgstr)))

    def _iter_messages(self) -> Iterator[Message]:
        for msg in (self.msgctxt, self.msgid, self.msgid_plural):
            if msg is not None:
                yield msg
        for _, msg in self.iter_strs():
            yield msg

    def escape_strings(self) -> None:
        for msg in self._iter_messages():
            msg.escape()

    def unescape_strings(self) -> None:
        for msg in self._iter_messages():
            msg.unescape()

    def to_po_lines(self) -> list[tuple[int, str]]:
        """Rebuild the catalog lines of the entry as ``(line_number, text)`` pairs."""
        prefix = "#~ " if self.obsolete else ""
        lines: list[tuple[int, str]] = []
        for keyword, msg in (
            ("msgctxt", self.msgctxt),
            ("msgid", self.msgid),
            ("msgid_plural", self.msgid_plural),
        ):
            if msg is not None:
                lines.append((msg.line_number, f'{prefix}{keyword} "{escape(msg.value)}"'))
        indexed = self.has_plural_form() or len(self.msgstr) > 1
        for idx, msg in self.iter_contiguous_strs():
            keyword = f"msgstr[{idx}]" if indexed else "msgstr"
            lines.append((msg.line_number, f'{prefix}{keyword} "{escape(msg.value)}"'))
        return lines
