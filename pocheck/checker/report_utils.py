"""Utilities for rendering check results.

Diagnostics keep byte offsets for their highlights; every renderer here
works on characters, through the serialized form of the diagnostics or
:func:`~pocheck.utils.offsets.spans_to_char_offsets`.
"""

from __future__ import annotations

import json
from collections import Counter
from enum import Enum
from typing import Iterable

from ..models import Diagnostic, DiagnosticLine, Severity
from ..po.escape import escape
from ..utils.offsets import spans_to_char_offsets
from .checker import CheckResult

HIGHLIGHT_MARKER = "**"


class SortMode(str, Enum):
    LINE = "line"
    MESSAGE = "message"
    RULE = "rule"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class OutputFormat(str, Enum):
    HUMAN = "human"
    JSON = "json"
    CSV = "csv"
    MARKDOWN = "markdown"
    MISSPELLED = "misspelled"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


def _all_lines(diagnostic: Diagnostic) -> list[int]:
    return [line.line_number for line in diagnostic.lines]


def sort_diagnostics(
    results: Iterable[CheckResult], sort: SortMode | str = SortMode.LINE
) -> list[Diagnostic]:
    """Flatten the diagnostics of all files and sort them."""
    diagnostics = [diag for result in results for diag in result.diagnostics]
    mode = SortMode(sort)

    def key(diag: Diagnostic) -> tuple:
        if mode is SortMode.MESSAGE:
            first = diag.lines[0].message if diag.lines else ""
            return (first, diag.path, _all_lines(diag))
        if mode is SortMode.RULE:
            return (diag.rule, diag.path, _all_lines(diag))
        return (diag.path, _all_lines(diag))

    return sorted(diagnostics, key=key)


def highlight_line(line: DiagnosticLine) -> str:
    """Return the escaped text of ``line`` with its highlights wrapped in ``**``."""
    text = line.message
    parts: list[str] = []
    last = 0
    for start, end in sorted(spans_to_char_offsets(text, line.highlights)):
        if start < last:
            continue
        parts.append(escape(text[last:start]))
        parts.append(f"{HIGHLIGHT_MARKER}{escape(text[start:end])}{HIGHLIGHT_MARKER}")
        last = end
    parts.append(escape(text[last:]))
    return "".join(parts)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    numbers = diagnostic.line_numbers
    location = f"{diagnostic.path}:{numbers[0]}" if numbers else diagnostic.path
    lines = [f"{location}: [{diagnostic.severity}:{diagnostic.rule}] {diagnostic.message}"]
    for line in diagnostic.lines:
        if line.line_number == 0:
            lines.append("        |")
        else:
            lines.append(f"  {line.line_number:>5} | {highlight_line(line)}")
    return "\n".join(lines)


def build_report_human(diagnostics: Iterable[Diagnostic]) -> str:
    return "\n\n".join(format_diagnostic(diag) for diag in diagnostics)


def build_report_json(diagnostics: Iterable[Diagnostic]) -> str:
    return json.dumps([diag.to_json_dict() for diag in diagnostics], ensure_ascii=False)


def build_report_csv(diagnostics: Iterable[Diagnostic]) -> list[list[str]]:
    """Convert diagnostics into CSV rows, the first row holding the headers."""
    rows: list[list[str]] = [["Path", "Line", "Rule", "Severity", "Message"]]
    for diag in diagnostics:
        numbers = diag.line_numbers
        rows.append(
            [
                diag.path,
                str(numbers[0]) if numbers else "",
                diag.rule,
                diag.severity.value,
                diag.message,
            ]
        )
    return rows


def build_report_markdown(results: Iterable[CheckResult], diagnostics: Iterable[Diagnostic]) -> str:
    """Summarise the results as a Markdown document, one table per file."""
    result_list = list(results)
    by_path: dict[str, list[Diagnostic]] = {}
    for diag in diagnostics:
        by_path.setdefault(diag.path, []).append(diag)
    total = sum(len(items) for items in by_path.values())

    lines: list[str] = ["# PO Check Report", ""]
    lines.append(f"- Checked {len(result_list)} file(s)")
    lines.append(f"- Total problems found: {total}")
    for result in result_list:
        path = str(result.path)
        lines.append("")
        lines.append(f"## {path}")
        lines.append("")
        items = by_path.get(path, [])
        if not items:
            lines.append("_No problems found._")
            continue
        lines.append("| Line | Rule | Severity | Message | Context |")
        lines.append("| --- | --- | --- | --- | --- |")
        for diag in items:
            numbers = diag.line_numbers
            context = " / ".join(highlight_line(line) for line in diag.lines if line.line_number)
            cells = [
                str(numbers[0]) if numbers else "-",
                diag.rule,
                diag.severity.value,
                diag.message,
                context or "-",
            ]
            lines.append("| " + " | ".join(cell.replace("|", "\\|") for cell in cells) + " |")
    return "\n".join(lines)


def build_misspelled_words(results: Iterable[CheckResult]) -> list[str]:
    words: set[str] = set()
    for result in results:
        words.update(result.misspelled_words)
    return sorted(words)


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> Counter:
    return Counter(diag.severity for diag in diagnostics)


def build_rule_stats(diagnostics: Iterable[Diagnostic]) -> str:
    counts = Counter(diag.rule for diag in diagnostics)
    lines = ["Errors by rule:"]
    for rule, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        lines.append(f"  {rule}: {count}")
    return "\n".join(lines)


def _problems(counts: Counter) -> str:
    total = sum(counts.values())
    return (
        f"{total} problems ({counts[Severity.ERROR]} errors, "
        f"{counts[Severity.WARNING]} warnings, {counts[Severity.INFO]} info)"
    )


def build_file_stats(results: Iterable[CheckResult]) -> str:
    lines = []
    for result in sorted(results, key=lambda item: str(item.path)):
        counts = count_by_severity(result.diagnostics)
        if not counts:
            lines.append(f"{result.path}: all OK!")
        else:
            lines.append(f"{result.path}: {_problems(counts)}")
    return "\n".join(lines)


def build_summary(results: Iterable[CheckResult]) -> str:
    result_list = list(results)
    if not result_list:
        return "No files checked"
    files_with_problems = [result for result in result_list if result.diagnostics]
    if not files_with_problems:
        return f"{len(result_list)} files checked: all OK!"
    counts = count_by_severity(diag for result in result_list for diag in result.diagnostics)
    total = sum(counts.values())
    return (
        f"{len(result_list)} files checked: {total} problems in {len(files_with_problems)} files "
        f"({counts[Severity.ERROR]} errors, {counts[Severity.WARNING]} warnings, "
        f"{counts[Severity.INFO]} info)"
    )
