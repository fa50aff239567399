"""Consistency of leading and trailing whitespace (line feeds excluded)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..utils.offsets import byte_len
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


def _whitespace_run(chars: Iterable[str]) -> int:
    count = 0
    for char in chars:
        if not char.isspace() or char == "\n":
            break
        count += 1
    return count


def get_whitespace_start(text: str) -> str:
    return text[: _whitespace_run(text)]


def get_whitespace_end(text: str) -> str:
    return text[len(text) - _whitespace_run(reversed(text)) :]


class WhitespaceStartRule(Rule):
    name = "whitespace-start"
    is_default = True

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if not msgid.strip() or not msgstr.strip():
            return
        id_ws = get_whitespace_start(msgid)
        str_ws = get_whitespace_start(msgstr)
        if id_ws != str_ws:
            ctx.report_msg(
                f"inconsistent leading whitespace ('{id_ws}' / '{str_ws}')",
                msgid,
                [(0, byte_len(id_ws))],
                msgstr,
                [(0, byte_len(str_ws))],
            )


class WhitespaceEndRule(Rule):
    name = "whitespace-end"
    is_default = True

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if not msgid.strip() or not msgstr.strip():
            return
        id_ws = get_whitespace_end(msgid)
        str_ws = get_whitespace_end(msgstr)
        if id_ws != str_ws:
            id_len, str_len = byte_len(msgid), byte_len(msgstr)
            ctx.report_msg(
                f"inconsistent trailing whitespace ('{id_ws}' / '{str_ws}')",
                msgid,
                [(id_len - byte_len(id_ws), id_len)],
                msgstr,
                [(str_len - byte_len(str_ws), str_len)],
            )
