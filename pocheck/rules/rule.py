"""Base class for the rules.

A rule declares its metadata as class attributes and implements only the
hooks it needs; the others are no-ops. Every hook receives a
:class:`~pocheck.checker.checker.RuleContext` giving access to the catalog
state and to the reporting methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Severity

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..po.entry import Entry


class Rule:
    """A consistency check applied to the entries of a catalog."""

    name: str = ""
    is_default: bool = False
    # Rules reporting entry membership (fuzzy, obsolete) are not checks.
    is_check: bool = True
    severity: Severity = Severity.INFO
    # Only the "untranslated" rule wants to see empty translations.
    needs_untranslated: bool = False

    def check_entry(self, ctx: "RuleContext", entry: "Entry") -> None:
        """Check the entry as a whole."""

    def check_ctxt(self, ctx: "RuleContext", entry: "Entry", msgctxt: str) -> None:
        """Check the context string of the entry."""

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        """Check a pair of source and translated strings."""

    def __str__(self) -> str:
        return f"{self.name} [{self.severity}]"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
