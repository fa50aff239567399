"""Escaping of quoted strings as they appear in PO files."""

from __future__ import annotations

import re

_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    '"': '\\"',
    "\\": "\\\\",
}
_UNESCAPES = {value[1]: key for key, value in _ESCAPES.items()}

_ESCAPE_RE = re.compile(r'[\n\r\t"\\]')
# A backslash followed by any character, or a lone trailing backslash.
_UNESCAPE_RE = re.compile(r"\\(.?)", re.DOTALL)


def escape(text: str) -> str:
    """Escape newlines, carriage returns, tabs, double quotes and backslashes."""
    return _ESCAPE_RE.sub(lambda match: _ESCAPES[match.group(0)], text)


def _unescape_match(match: re.Match[str]) -> str:
    char = match.group(1)
    if char in _UNESCAPES:
        return _UNESCAPES[char]
    # Unknown sequences and a trailing backslash are kept verbatim.
    return match.group(0)


def unescape(text: str) -> str:
    """Reverse :func:`escape`.

    Unknown sequences such as ``\\x`` are left untouched, as is a backslash
    at the very end of the string.
    """
    if "\\" not in text:
        return text
    return _UNESCAPE_RE.sub(_unescape_match, text)
