"""Rules comparing the translation as a whole with its source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Severity
from ..utils.offsets import byte_len
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


class BlankRule(Rule):
    """Report translations made only of whitespace.

    Wrong entry::

        msgid "test"
        msgstr " "
    """

    name = "blank"
    is_default = True
    severity = Severity.WARNING

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if msgid.strip() and msgstr and not msgstr.strip():
            ctx.report_msg("blank translation", msgid, [], msgstr, [(0, byte_len(msgstr))])


class ChangedRule(Rule):
    """Report translations different from the source (useful for English catalogs)."""

    name = "changed"

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if msgid.strip() and msgstr.strip() and msgstr != msgid:
            ctx.report_msg("changed translation", msgid, [], msgstr, [])


class UnchangedRule(Rule):
    """Report translations identical to the source.

    Strings written only in upper case (acronyms, constants) are ignored.
    """

    name = "unchanged"

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if not msgid.strip() or not msgstr.strip() or msgstr != msgid:
            return
        all_upper = all(char.isupper() for char in msgid if char.isalpha())
        if not all_upper and msgid.upper() != msgid:
            ctx.report_msg("unchanged translation", msgid, [], msgstr, [])


class UntranslatedRule(Rule):
    name = "untranslated"
    needs_untranslated = True

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if not msgstr:
            ctx.report_msg("untranslated message", msgid, [], msgstr, [])
