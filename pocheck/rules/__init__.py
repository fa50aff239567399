"""Consistency rules and their selection."""

from __future__ import annotations

from .registry import (
    SPECIAL_RULES,
    Rules,
    UnknownRulesError,
    format_rules_list,
    get_all_rules,
    get_selected_rules,
)
from .rule import Rule

__all__ = [
    "Rule",
    "Rules",
    "SPECIAL_RULES",
    "UnknownRulesError",
    "format_rules_list",
    "get_all_rules",
    "get_selected_rules",
]
