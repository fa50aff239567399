"""Consistency of format placeholders (``%s``, ``%(name)d``, ``{0}``...)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Severity
from ..po.format import FormatPos, Language, MatchStrPos, fmt_sort_index, fmt_strip_index
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


def _canonical(placeholders: list[MatchStrPos]) -> list[str]:
    """Placeholders in argument order, without their reordering index."""
    ordered = sorted(placeholders, key=lambda m: (fmt_sort_index(m.s), m.start, m.end))
    return [fmt_strip_index(m.s) for m in ordered]


def _check_placeholders(
    ctx: "RuleContext", msgid: str, msgstr: str, language: Language, message: str
) -> None:
    id_fmt = list(FormatPos(msgid, language))
    str_fmt = list(FormatPos(msgstr, language))
    if _canonical(id_fmt) != _canonical(str_fmt):
        ctx.report_msg(
            message,
            msgid,
            [(m.start, m.end) for m in id_fmt],
            msgstr,
            [(m.start, m.end) for m in str_fmt],
        )


class FormatsRule(Rule):
    """Compare the placeholders of entries flagged with a ``xxx-format`` keyword.

    Wrong entry::

        #, c-format
        msgid "%d files"
        msgstr "%s fichiers"
    """

    name = "formats"
    is_default = True
    severity = Severity.ERROR

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        language = entry.format_language
        if language is Language.NULL:
            return
        _check_placeholders(
            ctx, msgid, msgstr, language, f"inconsistent format strings ({language.display_name})"
        )


class CFormatsRule(Rule):
    """Same check as ``formats``, restricted to ``c-format`` entries."""

    name = "c-formats"
    is_default = True
    severity = Severity.ERROR

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if entry.format_language is not Language.C:
            return
        _check_placeholders(ctx, msgid, msgstr, Language.C, "inconsistent C format strings")
