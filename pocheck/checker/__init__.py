"""Checker package exports.

This package exposes the key helpers used by the command line and by
library callers so they can import from ``pocheck.checker``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .checker import CheckResult, Checker, RuleContext, check_file, run_check
    from .config import DEFAULT_LANG_ID, CheckOptions
    from .dictionary import DictionaryManager, DictionaryNotFoundError, LanguageToolDictionary
    from .discovery import find_po_files
    from .report_utils import OutputFormat, SortMode, sort_diagnostics

__all__ = [
    "CheckOptions",
    "CheckResult",
    "Checker",
    "DEFAULT_LANG_ID",
    "DictionaryManager",
    "DictionaryNotFoundError",
    "LanguageToolDictionary",
    "OutputFormat",
    "RuleContext",
    "SortMode",
    "check_file",
    "find_po_files",
    "run_check",
    "sort_diagnostics",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "CheckOptions": (".config", "CheckOptions"),
    "CheckResult": (".checker", "CheckResult"),
    "Checker": (".checker", "Checker"),
    "DEFAULT_LANG_ID": (".config", "DEFAULT_LANG_ID"),
    "DictionaryManager": (".dictionary", "DictionaryManager"),
    "DictionaryNotFoundError": (".dictionary", "DictionaryNotFoundError"),
    "LanguageToolDictionary": (".dictionary", "LanguageToolDictionary"),
    "OutputFormat": (".report_utils", "OutputFormat"),
    "RuleContext": (".checker", "RuleContext"),
    "SortMode": (".report_utils", "SortMode"),
    "check_file": (".checker", "check_file"),
    "find_po_files": (".discovery", "find_po_files"),
    "run_check": (".checker", "run_check"),
    "sort_diagnostics": (".report_utils", "sort_diagnostics"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    Submodules are only imported when used, so that importing the rules
    does not pull in LanguageTool.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"pocheck.checker{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
