"""Command-line entrypoint for pocheck."""

from __future__ import annotations

import argparse
import csv
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from .checker.checker import CheckResult, run_check
from .checker.config import ENV_IGNORE, ENV_SELECT, CheckOptions
from .checker.report_utils import (
    OutputFormat,
    SortMode,
    build_file_stats,
    build_misspelled_words,
    build_report_csv,
    build_report_human,
    build_report_json,
    build_report_markdown,
    build_rule_stats,
    build_summary,
    sort_diagnostics,
)
from .models import Diagnostic, Severity
from .rules import Rules, UnknownRulesError, format_rules_list, get_selected_rules

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocheck",
        description="Check the consistency of gettext translation catalogs (PO files).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: WARNING).",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Environment file with default settings (default: .env in the current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check PO files.")
    check.add_argument(
        "paths",
        nargs="*",
        default=["."],
        metavar="PATH",
        help="PO files or directories searched recursively for *.po files (default: .).",
    )
    check.add_argument("--fuzzy", action="store_true", help="Check fuzzy entries.")
    check.add_argument("--noqa", action="store_true", help="Check entries marked as noqa.")
    check.add_argument("--obsolete", action="store_true", help="Check obsolete entries.")
    check.add_argument(
        "-s",
        "--select",
        default=None,
        help=f"Comma-separated rules to run, 'all' or 'checks' (default: ${ENV_SELECT} or default rules).",
    )
    check.add_argument(
        "-i",
        "--ignore",
        default=None,
        help=f"Comma-separated rules to skip (default: ${ENV_IGNORE}).",
    )
    check.add_argument(
        "-e",
        "--severity",
        action="append",
        choices=Severity.all_values(),
        help="Only run rules with this severity (can be given multiple times).",
    )
    check.add_argument(
        "--path-words",
        type=Path,
        default=None,
        help="Directory with personal word lists named <language>.dic.",
    )
    check.add_argument(
        "--lang-id",
        default=None,
        help="Language of the sources for the spelling-ctxt and spelling-id rules (default: en_US).",
    )
    check.add_argument(
        "--sort",
        default=SortMode.LINE.value,
        choices=SortMode.all_values(),
        help="Sort order of the diagnostics (default: line).",
    )
    check.add_argument(
        "-o",
        "--output",
        default=OutputFormat.HUMAN.value,
        choices=OutputFormat.all_values(),
        help="Output format (default: human).",
    )
    check.add_argument("-r", "--rule-stats", action="store_true", help="Display the count of problems by rule.")
    check.add_argument("-f", "--file-stats", action="store_true", help="Display the count of problems by file.")
    check.add_argument("-n", "--no-errors", action="store_true", help="Do not display the diagnostics.")
    check.add_argument("--show-settings", action="store_true", help="Display the settings before checking.")
    check.add_argument("-q", "--quiet", action="store_true", help="Do not display anything.")
    check.add_argument(
        "--exit-zero",
        action="store_true",
        help="Exit with status 0 even when problems are found.",
    )
    check.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Maximum number of files checked concurrently.",
    )

    subparsers.add_parser("rules", help="List the available rules.")
    return parser


def format_settings(rules: Rules, options: CheckOptions, output: str) -> str:
    names = ", ".join(rules.names) or "<none>"
    yes_no = {True: "yes", False: "no"}
    return "\n".join(
        [
            "Configuration:",
            f"  Rules enabled: {names}",
            f"  Check fuzzy entries: {yes_no[rules.fuzzy_rule or options.fuzzy]}",
            f"  Check noqa entries: {yes_no[options.noqa]}",
            f"  Check obsolete entries: {yes_no[rules.obsolete_rule or options.obsolete]}",
            f"  Output format: {output}",
        ]
    )


def display_results(
    results: list[CheckResult], diagnostics: list[Diagnostic], args: argparse.Namespace
) -> None:
    output = OutputFormat(args.output)
    if output is OutputFormat.HUMAN:
        if diagnostics and not args.no_errors:
            print(build_report_human(diagnostics))
            print()
        if args.rule_stats:
            print(build_rule_stats(diagnostics))
        if args.file_stats:
            print(build_file_stats(results))
        print(build_summary(results))
    elif args.no_errors:
        return
    elif output is OutputFormat.JSON:
        print(build_report_json(diagnostics))
    elif output is OutputFormat.CSV:
        csv.writer(sys.stdout).writerows(build_report_csv(diagnostics))
    elif output is OutputFormat.MARKDOWN:
        print(build_report_markdown(results, diagnostics))
    else:
        for word in build_misspelled_words(results):
            print(word)


def run_check_command(args: argparse.Namespace) -> int:
    select = args.select if args.select is not None else os.environ.get(ENV_SELECT) or None
    ignore = args.ignore if args.ignore is not None else os.environ.get(ENV_IGNORE) or None
    severities = [Severity(value) for value in args.severity or []]
    try:
        rules = get_selected_rules(select, ignore, severities)
    except UnknownRulesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    options = CheckOptions.from_env(
        fuzzy=args.fuzzy,
        noqa=args.noqa,
        obsolete=args.obsolete,
        lang_id=args.lang_id,
        path_words=args.path_words,
        max_workers=args.max_workers,
    )
    if args.show_settings and not args.quiet:
        print(format_settings(rules, options, args.output))

    results = run_check(args.paths, rules, options)
    diagnostics = sort_diagnostics(results, args.sort)
    if not args.quiet:
        display_results(results, diagnostics, args)

    if diagnostics and not args.exit_zero:
        return 1
    return 0


def run_cli(args: argparse.Namespace) -> int:
    if args.command == "rules":
        print(format_rules_list())
        return 0
    return run_check_command(args)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    load_dotenv(dotenv_path=args.env_file or Path.cwd() / ".env", override=False)
    return run_cli(args)


if __name__ == "__main__":
    raise SystemExit(main())
