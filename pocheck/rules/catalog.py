"""Rules depending on the catalog header (charset, plural forms)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Severity
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


class EncodingRule(Rule):
    """Report entries containing bytes invalid for the declared charset."""

    name = "encoding"
    is_default = True

    def check_entry(self, ctx: "RuleContext", entry: "Entry") -> None:
        if entry.encoding_error:
            ctx.report_entry(f"invalid characters for encoding {ctx.encoding_name}", entry)


class PluralsRule(Rule):
    """Compare the number of plural translations with ``nplurals`` from the header."""

    name = "plurals"
    is_default = True
    severity = Severity.ERROR

    def check_entry(self, ctx: "RuleContext", entry: "Entry") -> None:
        expected = ctx.nplurals
        if expected == 0 or not entry.has_plural_form():
            return
        found = len(entry.msgstr)
        if found < expected:
            ctx.report_entry(
                f"missing translated plural form (found: {found}, expected: {expected})", entry
            )
        elif found > expected:
            ctx.report_entry(
                f"extra translated plural form (found: {found}, expected: {expected})", entry
            )
