"""Rules listing entries by flag rather than checking them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


class FuzzyRule(Rule):
    name = "fuzzy"
    is_check = False

    def check_entry(self, ctx: "RuleContext", entry: "Entry") -> None:
        if entry.fuzzy:
            ctx.report_entry("fuzzy entry", entry)


class ObsoleteRule(Rule):
    name = "obsolete"
    is_check = False

    def check_entry(self, ctx: "RuleContext", entry: "Entry") -> None:
        if entry.obsolete:
            ctx.report_entry("obsolete entry", entry)
