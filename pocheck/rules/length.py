"""Rules detecting translations much longer or shorter than the source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Severity
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


def _lengths(msgid: str, msgstr: str) -> tuple[int, int]:
    return len(msgid.strip()), len(msgstr.strip())


class LongRule(Rule):
    """Report translations at least ten times longer than the source."""

    name = "long"
    is_default = True
    severity = Severity.WARNING

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        len_id, len_str = _lengths(msgid, msgstr)
        if len_id == 0 or len_str == 0:
            return
        if len_id * 10 <= len_str or (len_id == 1 and len_str > 1):
            ctx.report_msg(f"translation too long ({len_id} / {len_str})", msgid, [], msgstr, [])


class ShortRule(Rule):
    """Report translations at least ten times shorter than the source."""

    name = "short"
    is_default = True
    severity = Severity.WARNING

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        len_id, len_str = _lengths(msgid, msgstr)
        if len_id == 0 or len_str == 0:
            return
        if len_str * 10 <= len_id or (len_str == 1 and len_id > 1):
            ctx.report_msg(f"translation too short ({len_id} / {len_str})", msgid, [], msgstr, [])
