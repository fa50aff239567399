"""Consistency of leading and trailing punctuation.

Half-width and full-width forms are considered, as well as the Arabic
semicolon and question mark:

- colon: ``:`` ``：``
- semicolon: ``;`` ``；`` ``؛``
- full stop: ``.`` ``。`` ``…``
- comma: ``,`` ``，`` ``،``
- exclamation mark: ``!`` ``！``
- question mark: ``?`` ``？`` ``؟``

In Greek the question mark is written ``;``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..utils.offsets import byte_len
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry

PUNCTUATION = frozenset(":：;；؛.。…,，،!！?？؟")

_NORMALIZE = str.maketrans(
    {
        "：": ":",
        "；": ";",
        "؛": ";",
        "。": ".",
        "，": ",",
        "،": ",",
        "！": "!",
        "？": "?",
        "؟": "?",
    }
)


def _punc_run(chars: Iterable[str]) -> int:
    """Length of the run of punctuation, whitespace allowed only before it."""
    count = 0
    punc_seen = False
    for char in chars:
        if char in PUNCTUATION:
            punc_seen = True
        elif not (char.isspace() and char != "\n") or punc_seen:
            break
        count += 1
    return count


def get_punc_start(text: str) -> str:
    return text[: _punc_run(text)]


def get_punc_end(text: str) -> str:
    count = _punc_run(reversed(text))
    return text[len(text) - count :]


def punc_normalize(text: str, language: str) -> str:
    if language == "el":
        text = text.replace("?", ";")
    return text.translate(_NORMALIZE).replace("...", "…")


class PuncStartRule(Rule):
    """Report different leading punctuation; a leading full stop is ignored."""

    name = "punc-start"
    is_default = True

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        id_punc = get_punc_start(msgid)
        str_punc = get_punc_start(msgstr)
        id_norm = punc_normalize(id_punc.strip(), ctx.language_code)
        str_norm = punc_normalize(str_punc.strip(), ctx.language_code)
        if id_norm.startswith(".") or str_norm.startswith("."):
            return
        if id_norm != str_norm:
            ctx.report_msg(
                f"inconsistent leading punctuation ('{id_norm}' / '{str_norm}')",
                msgid,
                [(0, byte_len(id_punc))],
                msgstr,
                [(0, byte_len(str_punc))],
            )


class PuncEndRule(Rule):
    """Report different trailing punctuation.

    Wrong entry::

        msgid "This is a test."
        msgstr "Ceci est un test"
    """

    name = "punc-end"
    is_default = True

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        id_punc = get_punc_end(msgid)
        str_punc = get_punc_end(msgstr)
        id_norm = punc_normalize(id_punc.strip(), ctx.language_code)
        str_norm = punc_normalize(str_punc.strip(), ctx.language_code)
        if id_norm != str_norm:
            id_len, str_len = byte_len(msgid), byte_len(msgstr)
            ctx.report_msg(
                f"inconsistent trailing punctuation ('{id_norm}' / '{str_norm}')",
                msgid,
                [(id_len - byte_len(id_punc), id_len)],
                msgstr,
                [(str_len - byte_len(str_punc), str_len)],
            )
