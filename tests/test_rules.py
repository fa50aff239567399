from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from pocheck.checker.checker import Checker
from pocheck.checker.dictionary import DictionaryNotFoundError
from pocheck.models import Diagnostic, Severity
from pocheck.rules import Rule, Rules, get_selected_rules
from pocheck.rules.brackets import BracketsRule
from pocheck.rules.catalog import EncodingRule, PluralsRule
from pocheck.rules.counts import DoubleQuotesRule, DoubleSpacesRule, EscapesRule, PipesRule, TabsRule
from pocheck.rules.flags import FuzzyRule, ObsoleteRule
from pocheck.rules.formats import CFormatsRule, FormatsRule
from pocheck.rules.length import LongRule, ShortRule
from pocheck.rules.newlines import NewlinesRule
from pocheck.rules.punctuation import PuncEndRule, PuncStartRule
from pocheck.rules.spelling import SpellingCtxtRule, SpellingIdRule, SpellingStrRule, check_words
from pocheck.rules.translation import BlankRule, ChangedRule, UnchangedRule, UntranslatedRule
from pocheck.rules.whitespace import WhitespaceEndRule, WhitespaceStartRule
from pocheck.po.format import Language


class DummyDictionary:
    def __init__(self, known: set[str]) -> None:
        self.known = known
        self.calls: list[str] = []

    def check(self, word: str) -> bool:
        self.calls.append(word)
        return word in self.known


def check_content(content: str, *rules: Rule, **kwargs) -> list[Diagnostic]:
    checker = Checker(content.encode("utf-8"), Rules(list(rules)), **kwargs)
    return checker.do_all_checks()


def _messages(diagnostics: list[Diagnostic]) -> list[str]:
    return [diag.message for diag in diagnostics]


def test_blank_translation() -> None:
    diags = check_content('msgid "test"\nmsgstr "  "\n', BlankRule())

    assert len(diags) == 1
    diag = diags[0]
    assert diag.rule == "blank"
    assert diag.severity is Severity.WARNING
    assert diag.message == "blank translation"
    assert [line.line_number for line in diag.lines] == [1, 0, 2]
    assert diag.lines[0].message == "test"
    assert diag.lines[1].message == ""
    assert diag.lines[2].highlights == [(0, 2)]


def test_blank_ignores_untranslated_and_normal_entries() -> None:
    assert check_content('msgid "test"\nmsgstr ""\n', BlankRule()) == []
    assert check_content('msgid "test"\nmsgstr "essai"\n', BlankRule()) == []


def test_changed_and_unchanged() -> None:
    content = 'msgid "Hello"\nmsgstr "Hello"\n\nmsgid "Bye"\nmsgstr "Salut"\n\nmsgid "OK"\nmsgstr "OK"\n'

    assert _messages(check_content(content, UnchangedRule())) == ["unchanged translation"]
    changed = check_content(content, ChangedRule())
    assert _messages(changed) == ["changed translation"]
    assert changed[0].lines[0].line_number == 4


def test_untranslated() -> None:
    diags = check_content('msgid "Hello"\nmsgstr ""\n', UntranslatedRule())

    assert _messages(diags) == ["untranslated message"]
    assert diags[0].severity is Severity.INFO


def test_formats_with_reordering_and_parentheses() -> None:
    content = '#, c-format\nmsgid "%d test (%s)"\nmsgstr "%2$d test (%1$s)"\n'

    diags = check_content(content, FormatsRule())
    assert _messages(diags) == ["inconsistent format strings (C)"]
    assert diags[0].severity is Severity.ERROR
    assert diags[0].lines[0].highlights == [(0, 2), (9, 11)]
    assert diags[0].lines[2].highlights == [(0, 4), (11, 15)]

    c_diags = check_content(content, CFormatsRule())
    assert _messages(c_diags) == ["inconsistent C format strings"]
    assert c_diags[0].rule == "c-formats"


def test_both_format_rules_report_independently() -> None:
    content = '#, c-format\nmsgid "%d test (%s)"\nmsgstr "%2$d test (%1$s)"\n'

    diags = check_content(content, CFormatsRule(), FormatsRule())
    assert [diag.rule for diag in diags] == ["c-formats", "formats"]


def test_default_run_reports_c_mismatch_under_both_format_rules() -> None:
    content = '#, c-format\nmsgid "%d test (%s)"\nmsgstr "%2$d test (%1$s)"\n'

    checker = Checker(content.encode("utf-8"), get_selected_rules())
    diags = [diag for diag in checker.do_all_checks() if diag.rule.endswith("formats")]

    assert sorted(_messages(diags)) == [
        "inconsistent C format strings",
        "inconsistent format strings (C)",
    ]


def test_formats_accept_reordered_arguments() -> None:
    content = '#, c-format\nmsgid "%s has %d files"\nmsgstr "%2$d fichiers pour %1$s"\n'

    assert check_content(content, FormatsRule(), CFormatsRule()) == []


def test_formats_require_format_keyword() -> None:
    assert check_content('msgid "%d files"\nmsgstr "%s fichiers"\n', FormatsRule()) == []


def test_python_brace_formats() -> None:
    content = '#, python-brace-format\nmsgid "{0} of {1}"\nmsgstr "{0}"\n'

    diags = check_content(content, FormatsRule(), CFormatsRule())
    assert _messages(diags) == ["inconsistent format strings (Python brace)"]


def test_python_formats() -> None:
    content = '#, python-format\nmsgid "%(count)d files"\nmsgstr "%(total)d fichiers"\n'

    assert _messages(check_content(content, FormatsRule())) == ["inconsistent format strings (Python)"]


def test_brackets_four_problems() -> None:
    diags = check_content('msgid "[(tested"\nmsgstr "testé>}"\n', BracketsRule())

    assert _messages(diags) == [
        "missing opening round brackets '(' (1 / 0)",
        "missing opening square brackets '[' (1 / 0)",
        "extra closing curly brackets '}' (0 / 1)",
        "extra closing angle brackets '>' (0 / 1)",
    ]
    assert diags[0].lines[0].highlights == [(1, 2)]
    assert diags[2].lines[2].highlights == [(7, 8)]
    assert diags[3].lines[2].highlights == [(6, 7)]


def test_brackets_opening_and_closing_together() -> None:
    diags = check_content('msgid "[a] [b]"\nmsgstr "a] [b"\n', BracketsRule())

    assert _messages(diags) == [
        "missing opening and closing square brackets '[' (2 / 1) and ']' (2 / 1)",
    ]


def test_brackets_extra_balanced_round_brackets_allowed() -> None:
    assert check_content('msgid "Save"\nmsgstr "Enregistrer (fichier)"\n', BracketsRule()) == []


def test_brackets_ignore_plural_markers() -> None:
    assert check_content('msgid "file(s)"\nmsgstr "fichiers"\n', BracketsRule()) == []
    assert check_content('msgid "FILE(S)"\nmsgstr "FICHIERS"\n', BracketsRule()) == []


def test_double_quotes() -> None:
    rule = DoubleQuotesRule()

    assert check_content('msgid "say \\"hi\\""\nmsgstr "dis „salut”"\n', rule) == []
    assert _messages(check_content('msgid "\\"hi\\""\nmsgstr "salut"\n', rule)) == [
        "missing double quotes (2 / 0)"
    ]


def test_double_spaces_pipes_tabs() -> None:
    assert _messages(check_content('msgid "a  b"\nmsgstr "a b"\n', DoubleSpacesRule())) == [
        "missing double spaces '  ' (1 / 0)"
    ]
    assert _messages(check_content('msgid "a|b"\nmsgstr "ab|c|d"\n', PipesRule())) == [
        "extra pipes '|' (1 / 2)"
    ]
    diags = check_content('msgid "a\\tb"\nmsgstr "ab"\n', TabsRule())
    assert _messages(diags) == ["missing tabs '\\t' (1 / 0)"]
    assert diags[0].severity is Severity.ERROR


def test_escapes() -> None:
    assert _messages(check_content('msgid "a\\\\b"\nmsgstr "ab"\n', EscapesRule())) == [
        "missing escape characters '\\' (1 / 0)"
    ]
    assert _messages(check_content('msgid "a\\\\\\\\b"\nmsgstr "a\\\\b"\n', EscapesRule())) == [
        "missing escaped escape characters '\\\\' (1 / 0)"
    ]


def test_newlines_count_then_ends() -> None:
    diags = check_content('msgid "a\\n"\nmsgstr "a"\n', NewlinesRule())

    assert _messages(diags) == [
        "missing line feeds '\\n' (1 / 0)",
        "missing line feed '\\n' at the end",
    ]


def test_newlines_carriage_return_at_beginning() -> None:
    diags = check_content('msgid "a"\nmsgstr "\\ra"\n', NewlinesRule())

    assert _messages(diags) == [
        "extra carriage returns '\\r' (0 / 1)",
        "extra carriage return '\\r' at the beginning",
    ]


def test_long_and_short() -> None:
    assert _messages(check_content('msgid "a"\nmsgstr "abc"\n', LongRule(), ShortRule())) == [
        "translation too long (1 / 3)"
    ]
    assert _messages(check_content('msgid "abcdefghij"\nmsgstr "a"\n', LongRule(), ShortRule())) == [
        "translation too short (10 / 1)"
    ]
    assert check_content('msgid "abc"\nmsgstr "abcd"\n', LongRule(), ShortRule()) == []


def test_punc_end() -> None:
    diags = check_content('msgid "This is a test."\nmsgstr "Ceci est un test"\n', PuncEndRule())

    assert _messages(diags) == ["inconsistent trailing punctuation ('.' / '')"]
    assert diags[0].lines[0].highlights == [(14, 15)]
    assert diags[0].lines[2].highlights == [(16, 16)]


def test_punc_end_full_width_and_whitespace() -> None:
    assert check_content('msgid "Hello!"\nmsgstr "你好！"\n', PuncEndRule()) == []
    assert check_content('msgid "Name:"\nmsgstr "Nom :"\n', PuncEndRule()) == []
    assert check_content('msgid "Wait..."\nmsgstr "Attendez…"\n', PuncEndRule()) == []


def test_punc_end_greek_question_mark() -> None:
    header = 'msgid ""\nmsgstr "Language: el\\n"\n\n'

    assert check_content(header + 'msgid "Why?"\nmsgstr "Γιατί;"\n', PuncEndRule()) == []
    assert check_content('msgid "Why?"\nmsgstr "Γιατί;"\n', PuncEndRule()) != []


def test_punc_start() -> None:
    assert _messages(check_content('msgid "!hello"\nmsgstr "hello"\n', PuncStartRule())) == [
        "inconsistent leading punctuation ('!' / '')"
    ]
    assert check_content('msgid ".hidden"\nmsgstr "caché"\n', PuncStartRule()) == []


def test_whitespace() -> None:
    diags = check_content('msgid " a"\nmsgstr "a"\n', WhitespaceStartRule(), WhitespaceEndRule())
    assert _messages(diags) == ["inconsistent leading whitespace (' ' / '')"]
    assert diags[0].lines[0].highlights == [(0, 1)]
    assert diags[0].lines[2].highlights == [(0, 0)]

    diags = check_content('msgid "a "\nmsgstr "é"\n', WhitespaceStartRule(), WhitespaceEndRule())
    assert _messages(diags) == ["inconsistent trailing whitespace (' ' / '')"]
    assert diags[0].lines[2].highlights == [(2, 2)]


def test_whitespace_ignores_line_feeds() -> None:
    content = 'msgid "a\\n"\nmsgstr "b"\n'
    assert check_content(content, WhitespaceStartRule(), WhitespaceEndRule()) == []


def test_encoding() -> None:
    content = (
        b'msgid ""\nmsgstr "Content-Type: text/plain; charset=ASCII\\n"\n\n'
        b'msgid "cafe"\nmsgstr "caf\xe9"\n'
    )
    diags = Checker(content, Rules([EncodingRule()])).do_all_checks()

    assert _messages(diags) == ["invalid characters for encoding ASCII"]
    assert diags[0].line_numbers == (4, 5)


def test_invalid_utf8() -> None:
    diags = Checker(b'msgid "a"\nmsgstr "\xff"\n', Rules([EncodingRule()])).do_all_checks()

    assert _messages(diags) == ["invalid characters for encoding UTF-8"]


def test_plurals() -> None:
    header = 'msgid ""\nmsgstr "Plural-Forms: nplurals=3; plural=n%10==1;\\n"\n\n'
    entry = 'msgid "file"\nmsgid_plural "files"\nmsgstr[0] "a"\nmsgstr[1] "b"\n'

    diags = check_content(header + entry, PluralsRule())
    assert _messages(diags) == ["missing translated plural form (found: 2, expected: 3)"]
    assert diags[0].severity is Severity.ERROR

    extra = entry + 'msgstr[2] "c"\nmsgstr[3] "d"\n'
    assert _messages(check_content(header + extra, PluralsRule())) == [
        "extra translated plural form (found: 4, expected: 3)"
    ]
    # Without a header there is nothing to compare with.
    assert check_content(entry, PluralsRule()) == []


def test_fuzzy_and_obsolete_rules() -> None:
    diags = check_content('#, fuzzy\nmsgid "a"\nmsgstr "b"\n', FuzzyRule())
    assert _messages(diags) == ["fuzzy entry"]
    assert [(line.line_number, line.message) for line in diags[0].lines] == [
        (2, 'msgid "a"'),
        (3, 'msgstr "b"'),
    ]

    diags = check_content('#~ msgid "a"\n#~ msgstr "b"\n', ObsoleteRule())
    assert _messages(diags) == ["obsolete entry"]
    assert diags[0].lines[0].message == '#~ msgid "a"'


def test_check_words() -> None:
    words, spans = check_words("Helo %s world helo Helo", Language.C, DummyDictionary({"world"}))

    assert words == ["Helo", "helo"]
    assert spans == [(0, 4), (14, 18), (19, 23)]


def test_spelling_rules() -> None:
    content = (
        'msgid ""\nmsgstr "Language: fr\\n"\n\n'
        'msgctxt "menu itme"\nmsgid "Helo world"\nmsgstr "Bonjour wrld wrld"\n'
    )
    dict_id = DummyDictionary({"menu", "world"})
    dict_str = DummyDictionary({"Bonjour"})
    languages: list[str] = []

    def factory(language: str) -> DummyDictionary:
        languages.append(language)
        return dict_str

    checker = Checker(
        content.encode("utf-8"),
        Rules([SpellingCtxtRule(), SpellingIdRule(), SpellingStrRule()]),
        dict_id=dict_id,
        dictionary_factory=factory,
    )
    diags = checker.do_all_checks()

    assert languages == ["fr"]
    assert _messages(diags) == [
        "misspelled words in context: itme",
        "misspelled words in source: Helo",
        "misspelled words in translation: wrld",
    ]
    assert diags[0].lines[0].line_number == 4
    assert diags[2].lines[2].highlights == [(8, 12), (13, 17)]
    assert checker.misspelled_words == {"itme", "Helo", "wrld"}
    assert dict_str.calls == ["Bonjour", "wrld"]


def test_spelling_without_dictionary_does_nothing() -> None:
    content = 'msgid "Helo"\nmsgstr "Bonjuor"\n'
    assert check_content(content, SpellingIdRule(), SpellingStrRule()) == []


def test_missing_translation_dictionary_is_reported_once() -> None:
    content = (
        'msgid ""\nmsgstr "Language: xx\\n"\n\n'
        'msgid "a"\nmsgstr "b"\n\nmsgid "c"\nmsgstr "d"\n'
    )

    def factory(language: str) -> DummyDictionary:
        raise DictionaryNotFoundError(language)

    diags = check_content(content, SpellingStrRule(), path="fr.po", dictionary_factory=factory)

    assert len(diags) == 1
    assert diags[0].rule == "spelling-str"
    assert diags[0].severity is Severity.WARNING
    assert diags[0].message == "dictionary not found for language 'xx', spelling rule ignored"
    assert diags[0].path == "fr.po"
    assert diags[0].lines == []


@pytest.mark.parametrize(
    "rule",
    [BlankRule(), BracketsRule(), FormatsRule(), PuncEndRule(), WhitespaceEndRule(), NewlinesRule()],
)
def test_consistent_entry_gives_no_diagnostic(rule: Rule) -> None:
    content = '#, c-format\nmsgid "Open %s (read only)."\nmsgstr "Ouvrir %s (lecture seule)."\n'
    assert check_content(content, rule) == []
