from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from pocheck.models import Severity
from pocheck.rules import (
    SPECIAL_RULES,
    UnknownRulesError,
    format_rules_list,
    get_all_rules,
    get_selected_rules,
)


def test_all_rules_have_unique_sorted_names() -> None:
    names = [rule.name for rule in get_all_rules()]

    assert names == sorted(names)
    assert len(names) == len(set(names)) == 26
    assert not set(names) & set(SPECIAL_RULES)


def test_default_selection() -> None:
    rules = get_selected_rules()

    assert "blank" in rules.names
    assert "formats" in rules.names
    assert "c-formats" in rules.names
    assert "fuzzy" not in rules.names
    assert not rules.spelling_str_rule
    assert not rules.untranslated_rule
    assert all(rule.is_default for rule in rules.enabled)


def test_select_all_and_checks() -> None:
    all_rules = get_selected_rules("all")
    checks = get_selected_rules("checks")

    assert all_rules.names == [rule.name for rule in get_all_rules()]
    assert all_rules.fuzzy_rule and all_rules.obsolete_rule
    assert "fuzzy" not in checks.names
    assert "obsolete" not in checks.names
    assert len(checks.names) == len(all_rules.names) - 2


def test_select_explicit_names() -> None:
    rules = get_selected_rules(" pipes, blank ,,")

    assert rules.names == ["blank", "pipes"]


def test_special_names_take_precedence_over_explicit_names() -> None:
    checks = get_selected_rules("checks,fuzzy")

    assert "fuzzy" not in checks.names
    assert "blank" in checks.names
    assert get_selected_rules("fuzzy,checks,all").names == get_selected_rules("all").names


def test_flags_computed_from_selection() -> None:
    rules = get_selected_rules(["untranslated", "spelling-str", "spelling-ctxt"])

    assert rules.untranslated_rule
    assert rules.spelling_str_rule
    assert rules.spelling_ctxt_rule
    assert not rules.spelling_id_rule


def test_unknown_selected_rules() -> None:
    with pytest.raises(UnknownRulesError, match="unknown selected rules: bar, foo") as excinfo:
        get_selected_rules("foo,blank,bar,foo")
    assert excinfo.value.names == ["bar", "foo"]


def test_unknown_ignored_rules() -> None:
    with pytest.raises(UnknownRulesError, match="unknown rules to ignore: zzz"):
        get_selected_rules(ignore="blank,zzz")


def test_ignore_after_select() -> None:
    rules = get_selected_rules("all", ignore="fuzzy,spelling-id")

    assert "fuzzy" not in rules.names
    assert "spelling-id" not in rules.names
    assert not rules.fuzzy_rule
    assert rules.obsolete_rule


def test_severity_filter() -> None:
    rules = get_selected_rules(severities=[Severity.ERROR])

    assert rules.names
    assert all(rule.severity is Severity.ERROR for rule in rules.enabled)
    assert "formats" in rules.names
    assert "blank" not in rules.names


def test_names_filtered_out_by_severity_are_unknown() -> None:
    with pytest.raises(UnknownRulesError, match="unknown selected rules: blank"):
        get_selected_rules("blank,formats", severities=[Severity.ERROR])
    with pytest.raises(UnknownRulesError, match="unknown rules to ignore: blank"):
        get_selected_rules(ignore="blank", severities=[Severity.ERROR])

    rules = get_selected_rules("formats,tabs", severities=[Severity.ERROR])
    assert rules.names == ["formats", "tabs"]


def test_rules_list() -> None:
    text = format_rules_list()
    default_count = sum(1 for rule in get_all_rules() if rule.is_default)

    assert text.startswith(f"{default_count} default rules:\n  blank [warning]")
    assert f"{26 - default_count} other rules:" in text
    assert "  c-formats [error]" in text
    assert "Special rules:" in text
    assert text.endswith("Total: 26 rules")
