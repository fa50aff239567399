"""Consistency of carriage returns and line feeds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Severity
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry

_CHARS = (
    ("\r", "carriage return", "'\\r'"),
    ("\n", "line feed", "'\\n'"),
)


class NewlinesRule(Rule):
    """Compare the number of ``\\r`` and ``\\n``, then their presence at both ends."""

    name = "newlines"
    is_default = True
    severity = Severity.ERROR

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        for char, label, shown in _CHARS:
            id_count, str_count = msgid.count(char), msgstr.count(char)
            if id_count != str_count:
                kind = "missing" if id_count > str_count else "extra"
                ctx.report_msg(
                    f"{kind} {label}s {shown} ({id_count} / {str_count})", msgid, [], msgstr, []
                )
        for where, test in (("beginning", str.startswith), ("end", str.endswith)):
            for char, label, shown in _CHARS:
                in_id, in_str = test(msgid, char), test(msgstr, char)
                if in_id != in_str:
                    kind = "missing" if in_id else "extra"
                    ctx.report_msg(
                        f"{kind} {label} {shown} at the {where}", msgid, [], msgstr, []
                    )
