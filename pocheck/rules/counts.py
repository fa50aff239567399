"""Rules comparing how many times some characters appear in source and translation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Severity
from ..utils.offsets import Span, find_all
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


def report_count_mismatch(
    ctx: "RuleContext",
    label: str,
    msgid: str,
    id_spans: list[Span],
    msgstr: str,
    str_spans: list[Span],
) -> bool:
    """Report ``missing``/``extra`` ``label`` when the counts differ.

    Returns True when something was reported.
    """
    id_count, str_count = len(id_spans), len(str_spans)
    if id_count == str_count:
        return False
    kind = "missing" if id_count > str_count else "extra"
    ctx.report_msg(
        f"{kind} {label} ({id_count} / {str_count})", msgid, id_spans, msgstr, str_spans
    )
    return True


class _CountRule(Rule):
    is_default = True
    label = ""
    needles: tuple[str, ...] = ()

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        report_count_mismatch(
            ctx,
            self.label,
            msgid,
            find_all(msgid, self.needles),
            msgstr,
            find_all(msgstr, self.needles),
        )


class DoubleQuotesRule(_CountRule):
    """Compare the number of double quotes, including the typographic ones."""

    name = "double-quotes"
    label = "double quotes"
    needles = ('"', "„", "”")


class DoubleSpacesRule(_CountRule):
    name = "double-spaces"
    label = "double spaces '  '"
    needles = ("  ",)


class PipesRule(_CountRule):
    name = "pipes"
    label = "pipes '|'"
    needles = ("|",)


class TabsRule(_CountRule):
    name = "tabs"
    label = "tabs '\\t'"
    needles = ("\t",)
    severity = Severity.ERROR


class EscapesRule(Rule):
    """Compare escaped backslashes first, then single backslashes."""

    name = "escapes"
    is_default = True
    severity = Severity.ERROR

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if report_count_mismatch(
            ctx,
            "escaped escape characters '\\\\'",
            msgid,
            find_all(msgid, "\\\\"),
            msgstr,
            find_all(msgstr, "\\\\"),
        ):
            return
        report_count_mismatch(
            ctx,
            "escape characters '\\'",
            msgid,
            find_all(msgid, "\\"),
            msgstr,
            find_all(msgstr, "\\"),
        )
