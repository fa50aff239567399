from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pocheck.checker.checker import CheckResult
from pocheck.checker.report_utils import (
    build_file_stats,
    build_misspelled_words,
    build_report_csv,
    build_report_markdown,
    build_rule_stats,
    build_summary,
    format_diagnostic,
    highlight_line,
    sort_diagnostics,
)
from pocheck.models import Diagnostic, DiagnosticLine, Severity


def _diag(path: str, rule: str, line: int, severity: Severity = Severity.WARNING, text: str = "x") -> Diagnostic:
    return Diagnostic.build(
        path,
        rule,
        severity,
        f"{rule} problem",
        [(line, text, []), (0, "", []), (line + 1, "y", [])],
    )


def _results() -> list[CheckResult]:
    return [
        CheckResult(
            Path("b.po"),
            [_diag("b.po", "pipes", 9, text="alpha"), _diag("b.po", "blank", 3, text="zeta")],
            {"wrld"},
        ),
        CheckResult(Path("a.po"), [_diag("a.po", "tabs", 5, Severity.ERROR, text="mid")], {"helo", "wrld"}),
        CheckResult(Path("c.po"), []),
    ]


def test_sort_by_line() -> None:
    diags = sort_diagnostics(_results(), "line")

    assert [(diag.path, diag.lines[0].line_number) for diag in diags] == [
        ("a.po", 5),
        ("b.po", 3),
        ("b.po", 9),
    ]


def test_sort_by_rule_and_message() -> None:
    assert [diag.rule for diag in sort_diagnostics(_results(), "rule")] == ["blank", "pipes", "tabs"]
    assert [diag.lines[0].message for diag in sort_diagnostics(_results(), "message")] == [
        "alpha",
        "mid",
        "zeta",
    ]


def test_highlight_line_escapes_and_marks() -> None:
    line = DiagnosticLine(line_number=1, message='é\t"x" end', highlights=[(2, 3), (4, 5)])

    assert highlight_line(line) == 'é**\\t**\\"**x**\\" end'


def test_format_diagnostic() -> None:
    diag = Diagnostic.build(
        "fr.po",
        "blank",
        Severity.WARNING,
        "blank translation",
        [(1, "test", []), (0, "", []), (2, " ", [(0, 1)])],
    )

    assert format_diagnostic(diag) == (
        "fr.po:1: [warning:blank] blank translation\n"
        "      1 | test\n"
        "        |\n"
        "      2 | ** **"
    )


def test_format_file_diagnostic_without_lines() -> None:
    diag = Diagnostic.build("fr.po", "read-error", Severity.ERROR, "could not read file: denied")

    assert format_diagnostic(diag) == "fr.po: [error:read-error] could not read file: denied"


def test_csv_rows() -> None:
    rows = build_report_csv(sort_diagnostics(_results()))

    assert rows[0] == ["Path", "Line", "Rule", "Severity", "Message"]
    assert rows[1] == ["a.po", "5", "tabs", "error", "tabs problem"]
    assert len(rows) == 4


def test_markdown_report() -> None:
    results = _results()
    report = build_report_markdown(results, sort_diagnostics(results))

    assert report.startswith("# PO Check Report\n\n- Checked 3 file(s)\n- Total problems found: 3")
    assert "## c.po\n\n_No problems found._" in report
    assert "| 5 | tabs | error | tabs problem | mid / y |" in report


def test_misspelled_words() -> None:
    assert build_misspelled_words(_results()) == ["helo", "wrld"]


def test_statistics() -> None:
    results = _results()
    diags = sort_diagnostics(results)

    assert build_rule_stats(diags) == "Errors by rule:\n  blank: 1\n  pipes: 1\n  tabs: 1"
    assert build_file_stats(results) == (
        "a.po: 1 problems (1 errors, 0 warnings, 0 info)\n"
        "b.po: 2 problems (0 errors, 2 warnings, 0 info)\n"
        "c.po: all OK!"
    )


def test_summary() -> None:
    assert build_summary([]) == "No files checked"
    assert build_summary([CheckResult(Path("a.po"))]) == "1 files checked: all OK!"
    assert build_summary(_results()) == (
        "3 files checked: 3 problems in 2 files (1 errors, 2 warnings, 0 info)"
    )
