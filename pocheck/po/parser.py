"""Line-oriented parser for PO catalogs.

The parser reads raw bytes and yields :class:`~pocheck.po.entry.Entry`
objects one at a time. It keeps the state discovered in the catalog header
(language, charset and number of plural forms) so that callers can query it
once the header entry has been produced.
"""

from __future__ import annotations

import codecs
import logging
from enum import Enum
from typing import Iterator

from .entry import Entry
from .format.language import Language
from .message import Message

LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING_NAME = "UTF-8"


class _Field(Enum):
    COMMENT = "comment"
    CTXT = "ctxt"
    ID = "id"
    ID_PLURAL = "id_plural"
    STR = "str"


class Parser:
    """Parse a catalog held in memory.

    Iterating over the parser yields entries in file order. The header
    attributes are updated as soon as the header entry is finalized.
    """

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.language = ""
        self.language_code = ""
        self.country = ""
        self.encoding: str | None = None
        self.encoding_label = ""
        self.nplurals = 0
        self._field = _Field.COMMENT
        self._str_index = 0
        self._encoding_error = False

    def encoding_name(self) -> str:
        """Return the name of the charset in use (``UTF-8`` unless declared otherwise)."""
        return self.encoding_label if self.encoding else DEFAULT_ENCODING_NAME

    def __iter__(self) -> Iterator[Entry]:
        entry: Entry | None = None
        for line_number, line in enumerate(self.data.split(b"\n"), start=1):
            if not line:
                if entry is not None:
                    yield self._finalize(entry)
                    entry = None
                continue
            if entry is None:
                entry = Entry(line_number)
                self._field = _Field.COMMENT
                self._encoding_error = False
            if line.startswith((b"#,", b"#=")):
                self._parse_keywords(line[2:], entry)
            elif line.startswith(b"#~ "):
                entry.obsolete = True
                self._parse_message(line[3:], line_number, entry)
            elif line.startswith((b"msg", b'"')):
                self._parse_message(line, line_number, entry)
        if entry is not None:
            yield self._finalize(entry)

    def _finalize(self, entry: Entry) -> Entry:
        entry.encoding_error = self._encoding_error
        entry.unescape_strings()
        self._parse_header(entry)
        return entry

    def _parse_header(self, entry: Entry) -> None:
        if not entry.is_header():
            return
        msgstr = entry.msgstr.get(0)
        if msgstr is None or not msgstr.value:
            return
        for line in msgstr.value.split("\n"):
            keyword, sep, value = line.partition(":")
            if not sep:
                continue
            keyword = keyword.strip().lower()
            if keyword == "language":
                self._set_language(value)
            elif keyword == "content-type":
                self._set_charset(value)
            elif keyword == "plural-forms":
                self._set_nplurals(value)

    def _set_language(self, value: str) -> None:
        self.language = value.strip()
        code, sep, country = value.partition("_")
        if sep:
            self.language_code = code.strip()
            self.country = country.strip()
        else:
            self.language_code = self.language

    def _set_charset(self, value: str) -> None:
        pos = value.find("charset=")
        if pos < 0:
            return
        charset = value[pos + len("charset="):]
        for idx, char in enumerate(charset):
            if char.isspace() or char == ";":
                charset = charset[:idx]
                break
        try:
            codec = codecs.lookup(charset)
        except LookupError:
            LOGGER.warning("Unknown charset %r, decoding as UTF-8", charset)
            return
        if codec.name != "utf-8":
            self.encoding = codec.name
            self.encoding_label = charset

    def _set_nplurals(self, value: str) -> None:
        pos = value.find("nplurals=")
        if pos < 0:
            return
        digits = ""
        for char in value[pos + len("nplurals="):]:
            if char not in "0123456789":
                break
            digits += char
        if digits:
            self.nplurals = int(digits)

    @staticmethod
    def _parse_keywords(line: bytes, entry: Entry) -> None:
        for raw in line.split(b","):
            keyword = raw.decode("utf-8", errors="replace").strip()
            if keyword == "fuzzy":
                entry.fuzzy = True
            elif keyword == "noqa":
                entry.noqa = True
            elif keyword.startswith("noqa:"):
                entry.noqa_rules = {rule.strip() for rule in keyword[5:].split(";")}
            elif keyword == "no-wrap":
                entry.nowrap = True
            elif keyword.endswith("-format"):
                entry.format_language = Language.from_keyword(keyword[: -len("-format")])
            entry.keywords.append(keyword)

    def _decode(self, raw: bytes) -> str:
        encoding = self.encoding or "utf-8"
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            self._encoding_error = True
            return raw.decode(encoding, errors="replace")

    def _extract_string(self, line: bytes) -> str:
        start = line.find(b'"')
        end = line.rfind(b'"')
        if start < 0 or start == end:
            return ""
        return self._decode(line[start + 1 : end])

    def _parse_message(self, line: bytes, line_number: int, entry: Entry) -> None:
        if line.startswith(b"msgctxt"):
            self._field = _Field.CTXT
            entry.msgctxt = Message(line_number, self._extract_string(line))
        elif line.startswith(b"msgid_plural"):
            self._field = _Field.ID_PLURAL
            entry.msgid_plural = Message(line_number, self._extract_string(line))
        elif line.startswith(b"msgid"):
            self._field = _Field.ID
            entry.msgid = Message(line_number, self._extract_string(line))
        elif line.startswith(b"msgstr["):
            idx_end = line.find(b"]")
            index = line[7:idx_end] if idx_end >= 0 else b""
            if index.isdigit():
                self._field = _Field.STR
                self._str_index = int(index)
                entry.msgstr[self._str_index] = Message(line_number, self._extract_string(line))
        elif line.startswith(b"msgstr"):
            self._field = _Field.STR
            self._str_index = 0
            entry.msgstr[0] = Message(line_number, self._extract_string(line))
        elif line.startswith(b'"'):
            target = self._current_message(entry)
            if target is not None:
                target.append(self._extract_string(line))

    def _current_message(self, entry: Entry) -> Message | None:
        if self._field is _Field.CTXT:
            return entry.msgctxt
        if self._field is _Field.ID:
            return entry.msgid
        if self._field is _Field.ID_PLURAL:
            return entry.msgid_plural
        if self._field is _Field.STR:
            return entry.msgstr.get(self._str_index)
        return None
