"""Format languages, selected by the ``xxx-format`` keyword of an entry."""

from __future__ import annotations

from enum import Enum

from .base import FormatParser
from .lang_c import FormatC
from .lang_null import FormatNull
from .lang_python import FormatPython, FormatPythonBrace


class Language(str, Enum):
    """Format language of an entry."""

    NULL = "null"
    C = "c"
    PYTHON = "python"
    PYTHON_BRACE = "python-brace"

    @classmethod
    def from_keyword(cls, name: str) -> "Language":
        """Map the prefix of a ``xxx-format`` keyword to a language.

        Unsupported languages map to :attr:`NULL`.
        """
        try:
            return cls(name)
        except ValueError:
            return cls.NULL

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def format_parser(self) -> FormatParser:
        return _PARSERS[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    Language.NULL: "none",
    Language.C: "C",
    Language.PYTHON: "Python",
    Language.PYTHON_BRACE: "Python brace",
}

# Parsers hold no state, one instance per language is enough.
_PARSERS: dict[Language, FormatParser] = {
    Language.NULL: FormatNull(),
    Language.C: FormatC(),
    Language.PYTHON: FormatPython(),
    Language.PYTHON_BRACE: FormatPythonBrace(),
}
