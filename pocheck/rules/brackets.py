"""Consistency of round, square, curly and angle brackets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.offsets import Span, find_all
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry

BRACKETS = (
    ("(", ")", "round"),
    ("[", "]", "square"),
    ("{", "}", "curly"),
    ("<", ">", "angle"),
)

# Plural markers like "file(s)" are not brackets.
_EXCLUDED = (b"(s)", b"(S)")


def _opening_spans(text: str, char: str) -> list[Span]:
    spans = find_all(text, char)
    if char != "(":
        return spans
    data = text.encode("utf-8")
    return [(start, end) for start, end in spans if data[start : start + 3] not in _EXCLUDED]


def _closing_spans(text: str, char: str) -> list[Span]:
    spans = find_all(text, char)
    if char != ")":
        return spans
    data = text.encode("utf-8")
    return [(start, end) for start, end in spans if data[max(end - 3, 0) : end] not in _EXCLUDED]


class BracketsRule(Rule):
    """Compare the number of opening and closing brackets of each kind.

    Extra round brackets in the translation are accepted when they are
    balanced, as translations often add a precision between parentheses.
    """

    name = "brackets"
    is_default = True

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        for opening, closing, kind in BRACKETS:
            id_open = _opening_spans(msgid, opening)
            str_open = _opening_spans(msgstr, opening)
            id_close = _closing_spans(msgid, closing)
            str_close = _closing_spans(msgstr, closing)
            id_count_open, str_count_open = len(id_open), len(str_open)
            id_count_close, str_count_close = len(id_close), len(str_close)
            if (
                opening == "("
                and id_count_open < str_count_open
                and id_count_close < str_count_close
            ):
                continue
            both_missing = id_count_open > str_count_open and id_count_close > str_count_close
            both_extra = id_count_open < str_count_open and id_count_close < str_count_close
            if both_missing or both_extra:
                ctx.report_msg(
                    f"{'missing' if both_missing else 'extra'} opening and closing {kind} "
                    f"brackets '{opening}' ({id_count_open} / {str_count_open}) "
                    f"and '{closing}' ({id_count_close} / {str_count_close})",
                    msgid,
                    sorted(id_open + id_close),
                    msgstr,
                    sorted(str_open + str_close),
                )
                continue
            if id_count_open != str_count_open:
                ctx.report_msg(
                    f"{'missing' if id_count_open > str_count_open else 'extra'} opening "
                    f"{kind} brackets '{opening}' ({id_count_open} / {str_count_open})",
                    msgid,
                    id_open,
                    msgstr,
                    str_open,
                )
            if id_count_close != str_count_close:
                ctx.report_msg(
                    f"{'missing' if id_count_close > str_count_close else 'extra'} closing "
                    f"{kind} brackets '{closing}' ({id_count_close} / {str_count_close})",
                    msgid,
                    id_close,
                    msgstr,
                    str_close,
                )
