"""Catalog of rules and selection of the rules to run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..models import Severity
from .brackets import BracketsRule
from .catalog import EncodingRule, PluralsRule
from .counts import DoubleQuotesRule, DoubleSpacesRule, EscapesRule, PipesRule, TabsRule
from .flags import FuzzyRule, ObsoleteRule
from .formats import CFormatsRule, FormatsRule
from .length import LongRule, ShortRule
from .newlines import NewlinesRule
from .punctuation import PuncEndRule, PuncStartRule
from .rule import Rule
from .spelling import SpellingCtxtRule, SpellingIdRule, SpellingStrRule
from .translation import BlankRule, ChangedRule, UnchangedRule, UntranslatedRule
from .whitespace import WhitespaceEndRule, WhitespaceStartRule

SPECIAL_RULES = ("all", "checks")


class UnknownRulesError(ValueError):
    """Raised when rule names given for selection or exclusion do not exist."""

    def __init__(self, action: str, names: Iterable[str]) -> None:
        self.action = action
        self.names = sorted(set(names))
        super().__init__(f"unknown {action}: {', '.join(self.names)}")


def get_all_rules() -> list[Rule]:
    """Return a new instance of every rule, sorted by name."""
    return [
        BlankRule(),
        BracketsRule(),
        CFormatsRule(),
        ChangedRule(),
        DoubleQuotesRule(),
        DoubleSpacesRule(),
        EncodingRule(),
        EscapesRule(),
        FormatsRule(),
        FuzzyRule(),
        LongRule(),
        NewlinesRule(),
        ObsoleteRule(),
        PipesRule(),
        PluralsRule(),
        PuncEndRule(),
        PuncStartRule(),
        ShortRule(),
        SpellingCtxtRule(),
        SpellingIdRule(),
        SpellingStrRule(),
        TabsRule(),
        UnchangedRule(),
        UntranslatedRule(),
        WhitespaceEndRule(),
        WhitespaceStartRule(),
    ]


@dataclass
class Rules:
    """The enabled rules, plus flags computed once for the checker loop."""

    enabled: list[Rule] = field(default_factory=list)
    fuzzy_rule: bool = field(init=False)
    obsolete_rule: bool = field(init=False)
    untranslated_rule: bool = field(init=False)
    spelling_ctxt_rule: bool = field(init=False)
    spelling_id_rule: bool = field(init=False)
    spelling_str_rule: bool = field(init=False)

    def __post_init__(self) -> None:
        names = set(self.names)
        self.fuzzy_rule = "fuzzy" in names
        self.obsolete_rule = "obsolete" in names
        self.untranslated_rule = any(rule.needs_untranslated for rule in self.enabled)
        self.spelling_ctxt_rule = "spelling-ctxt" in names
        self.spelling_id_rule = "spelling-id" in names
        self.spelling_str_rule = "spelling-str" in names

    @property
    def names(self) -> list[str]:
        return [rule.name for rule in self.enabled]


def _split_names(value: str | Sequence[str] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [name.strip() for name in value if name.strip()]


def get_selected_rules(
    select: str | Sequence[str] | None = None,
    ignore: str | Sequence[str] | None = None,
    severities: Iterable[Severity] | None = None,
) -> Rules:
    """Resolve the rules to run.

    Args:
        select: Comma-separated rule names (or a list). ``all`` selects every
            rule and ``checks`` every rule that is a check; both take precedence
            over the other names. Without a selection, the default rules are
            used.
        ignore: Rule names removed after the selection.
        severities: Keep only rules with one of these severities (all when
            empty or None).

    Raises:
        UnknownRulesError: If a selected or ignored name is not a rule of the
            requested severities.
    """
    wanted_severities = set(severities or ())
    candidates = [
        rule
        for rule in get_all_rules()
        if not wanted_severities or rule.severity in wanted_severities
    ]
    # Rules filtered out by severity are unknown too.
    known = {rule.name for rule in candidates} | set(SPECIAL_RULES)

    if select is None:
        selected = [rule for rule in candidates if rule.is_default]
    else:
        names = _split_names(select)
        unknown = [name for name in names if name not in known]
        if unknown:
            raise UnknownRulesError("selected rules", unknown)
        if "all" in names:
            selected = candidates
        elif "checks" in names:
            selected = [rule for rule in candidates if rule.is_check]
        else:
            selected = [rule for rule in candidates if rule.name in names]

    if ignore is not None:
        names = _split_names(ignore)
        unknown = [name for name in names if name not in known]
        if unknown:
            raise UnknownRulesError("rules to ignore", unknown)
        selected = [rule for rule in selected if rule.name not in names]

    return Rules(selected)


def format_rules_list() -> str:
    """Describe all the rules, default ones first."""
    rules = get_all_rules()
    default_rules = [rule for rule in rules if rule.is_default]
    other_rules = [rule for rule in rules if not rule.is_default]
    lines = [f"{len(default_rules)} default rules:"]
    lines.extend(f"  {rule}" for rule in default_rules)
    lines.append("")
    lines.append(f"{len(other_rules)} other rules:")
    lines.extend(f"  {rule}" for rule in other_rules)
    lines.append("")
    lines.append("Special rules:")
    lines.append("  all: select all rules")
    lines.append("  checks: select all rules that report real problems (not fuzzy or obsolete)")
    lines.append("")
    lines.append(f"Total: {len(rules)} rules")
    return "\n".join(lines)
