"""Run the rules on the entries of PO catalogs.

The :class:`Checker` pulls entries from the parser, filters them, and
dispatches every enabled rule on each entry. Rules report problems through
the :class:`RuleContext` they receive, which knows the rule being run and
the line numbers of the strings being checked.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable, Sequence

from ..models import Diagnostic, Severity
from ..po.entry import Entry
from ..po.parser import Parser
from ..rules import Rule, Rules
from ..utils.offsets import Span
from .config import CheckOptions
from .dictionary import DictionaryManager, DictionaryNotFoundError, SpellingDictionary
from .discovery import find_po_files

LOGGER = logging.getLogger(__name__)

READ_ERROR_RULE = "read-error"

DictionaryFactory = Callable[[str], SpellingDictionary]


@dataclass(frozen=True)
class RuleContext:
    """State given to a rule for one dispatch, and the way back to the checker."""

    checker: "Checker"
    rule: str
    severity: Severity
    line_ctxt: int = 0
    line_id: int = 0
    line_str: int = 0

    @property
    def language_code(self) -> str:
        return self.checker.parser.language_code

    @property
    def encoding_name(self) -> str:
        return self.checker.parser.encoding_name()

    @property
    def nplurals(self) -> int:
        return self.checker.parser.nplurals

    @property
    def dict_id(self) -> SpellingDictionary | None:
        return self.checker.dict_id

    @property
    def dict_str(self) -> SpellingDictionary | None:
        return self.checker.dict_str

    def add_misspelled_words(self, words: Iterable[str]) -> None:
        self.checker.misspelled_words.update(words)

    def _report(self, message: str, lines: Iterable[tuple[int, str, Iterable[Span]]]) -> None:
        self.checker.add_diagnostic(
            Diagnostic.build(self.checker.path, self.rule, self.severity, message, lines)
        )

    def report_entry(self, message: str, entry: Entry) -> None:
        """Report a problem on the whole entry, shown as its catalog lines."""
        self._report(message, [(number, text, []) for number, text in entry.to_po_lines()])

    def report_ctxt(self, message: str, msgctxt: str, highlights: Sequence[Span]) -> None:
        self._report(message, [(self.line_ctxt, msgctxt, highlights)])

    def report_msg(
        self,
        message: str,
        msgid: str,
        id_highlights: Sequence[Span],
        msgstr: str,
        str_highlights: Sequence[Span],
    ) -> None:
        """Report a problem on a source/translation pair."""
        self._report(
            message,
            [
                (self.line_id, msgid, id_highlights),
                (0, "", []),
                (self.line_str, msgstr, str_highlights),
            ],
        )


class Checker:
    """Check one catalog held in memory."""

    def __init__(
        self,
        data: bytes,
        rules: Rules,
        *,
        path: str | Path = "",
        dict_id: SpellingDictionary | None = None,
        dictionary_factory: DictionaryFactory | None = None,
        check_fuzzy: bool = False,
        check_noqa: bool = False,
        check_obsolete: bool = False,
    ) -> None:
        self.parser = Parser(data)
        self.rules = rules
        self.path = str(path)
        self.dict_id = dict_id
        self.dict_str: SpellingDictionary | None = None
        self.dictionary_factory = dictionary_factory
        self.check_fuzzy = check_fuzzy
        self.check_noqa = check_noqa
        self.check_obsolete = check_obsolete
        self.diagnostics: list[Diagnostic] = []
        self.misspelled_words: set[str] = set()
        self._dict_str_failed = False

    def add_diagnostic(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def report_file(self, rule: str, severity: Severity, message: str) -> None:
        """Report a problem about the file itself, without context lines."""
        self.add_diagnostic(Diagnostic.build(self.path, rule, severity, message))

    def _load_dict_str(self) -> None:
        if self.dict_str is not None or self._dict_str_failed or self.dictionary_factory is None:
            return
        try:
            self.dict_str = self.dictionary_factory(self.parser.language)
        except DictionaryNotFoundError as exc:
            self._dict_str_failed = True
            LOGGER.warning("%s: %s", self.path, exc)
            self.report_file("spelling-str", Severity.WARNING, str(exc))

    def _skip_entry(self, entry: Entry) -> bool:
        if not entry.is_translated() and not self.rules.untranslated_rule:
            return True
        if entry.fuzzy and not self.check_fuzzy and not self.rules.fuzzy_rule:
            return True
        if entry.noqa and not self.check_noqa:
            return True
        return entry.obsolete and not self.check_obsolete and not self.rules.obsolete_rule

    def check_entry(self, entry: Entry, rule: Rule) -> None:
        """Run all the hooks of ``rule`` on ``entry``."""
        ctx = RuleContext(self, rule.name, rule.severity)
        include_empty = self.rules.untranslated_rule and rule.needs_untranslated
        rule.check_entry(ctx, entry)
        if entry.msgctxt is not None:
            rule.check_ctxt(
                replace(ctx, line_ctxt=entry.msgctxt.line_number), entry, entry.msgctxt.value
            )
        msgid = entry.msgid
        msgstr_0 = entry.msgstr.get(0)
        if msgid is not None and msgstr_0 is not None and (msgstr_0.value or include_empty):
            rule.check_msg(
                replace(ctx, line_id=msgid.line_number, line_str=msgstr_0.line_number),
                entry,
                msgid.value,
                msgstr_0.value,
            )
        msgid_plural = entry.msgid_plural
        if msgid_plural is None:
            return
        for index, msgstr_n in entry.iter_strs():
            if index == 0 or not (msgstr_n.value or include_empty):
                continue
            rule.check_msg(
                replace(ctx, line_id=msgid_plural.line_number, line_str=msgstr_n.line_number),
                entry,
                msgid_plural.value,
                msgstr_n.value,
            )

    def do_all_checks(self) -> list[Diagnostic]:
        """Check every entry of the catalog and return the diagnostics."""
        for entry in self.parser:
            if entry.is_header():
                if self.rules.spelling_str_rule:
                    self._load_dict_str()
                continue
            if self._skip_entry(entry):
                continue
            for rule in self.rules.enabled:
                if rule.name in entry.noqa_rules:
                    continue
                self.check_entry(entry, rule)
        return self.diagnostics


@dataclass
class CheckResult:
    """Outcome of the check of one file."""

    path: Path
    diagnostics: list[Diagnostic] = field(default_factory=list)
    misspelled_words: set[str] = field(default_factory=set)


def _close_dictionary(dictionary: SpellingDictionary | None) -> None:
    close = getattr(dictionary, "close", None)
    if close is not None:
        close()


def check_file(
    path: Path,
    rules: Rules,
    options: CheckOptions | None = None,
    *,
    dict_id: SpellingDictionary | None = None,
    dictionary_factory: DictionaryFactory | None = None,
) -> CheckResult:
    """Check a single catalog file.

    A file that cannot be read gives a single ``read-error`` diagnostic.
    """
    options = options or CheckOptions()
    try:
        data = path.read_bytes()
    except OSError as exc:
        LOGGER.warning("Could not read %s: %s", path, exc)
        reason = exc.strerror or str(exc)
        return CheckResult(
            path=path,
            diagnostics=[
                Diagnostic.build(path, READ_ERROR_RULE, Severity.ERROR, f"could not read file: {reason}")
            ],
        )
    checker = Checker(
        data,
        rules,
        path=path,
        dict_id=dict_id,
        dictionary_factory=dictionary_factory,
        check_fuzzy=options.fuzzy,
        check_noqa=options.noqa,
        check_obsolete=options.obsolete,
    )
    try:
        checker.do_all_checks()
    finally:
        _close_dictionary(checker.dict_str)
    LOGGER.debug("%s: %d diagnostic(s)", path, len(checker.diagnostics))
    return CheckResult(path, checker.diagnostics, checker.misspelled_words)


def run_check(
    paths: Iterable[str | Path],
    rules: Rules,
    options: CheckOptions | None = None,
    *,
    manager: DictionaryManager | None = None,
) -> list[CheckResult]:
    """Check all the catalogs found in ``paths``, one file per worker.

    Returns:
        One result per file, sorted by path
    """
    options = options or CheckOptions()
    files = find_po_files(paths)
    if not files:
        LOGGER.info("No PO files found")
        return []

    needs_dict_id = rules.spelling_ctxt_rule or rules.spelling_id_rule
    if manager is None and (needs_dict_id or rules.spelling_str_rule):
        manager = DictionaryManager(path_words=options.path_words)

    dict_id: SpellingDictionary | None = None
    if needs_dict_id and manager is not None:
        try:
            dict_id = manager.get_dictionary(options.lang_id)
        except DictionaryNotFoundError as exc:
            LOGGER.warning("%s", exc)
    dictionary_factory = (
        manager.get_dictionary if rules.spelling_str_rule and manager is not None else None
    )

    executor_kwargs = {}
    if options.max_workers is not None:
        executor_kwargs["max_workers"] = options.max_workers
    results: list[CheckResult] = []
    try:
        with ThreadPoolExecutor(**executor_kwargs) as executor:
            futures = {
                executor.submit(
                    check_file,
                    path,
                    rules,
                    options,
                    dict_id=dict_id,
                    dictionary_factory=dictionary_factory,
                ): path
                for path in files
            }
            for future in as_completed(futures):
                results.append(future.result())
    finally:
        _close_dictionary(dict_id)
    results.sort(key=lambda result: str(result.path))
    return results
