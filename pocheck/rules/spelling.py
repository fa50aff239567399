"""Spell checking of the context, the source and the translation.

The rules do nothing when the matching dictionary could not be loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..po.format import Language, WordPos
from ..utils.offsets import Span
from .rule import Rule

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..checker.checker import RuleContext
    from ..checker.dictionary import SpellingDictionary
    from ..po.entry import Entry


def check_words(
    text: str, language: Language, dictionary: "SpellingDictionary"
) -> tuple[list[str], list[Span]]:
    """Spell check the words of ``text``, placeholders excluded.

    Returns:
        The sorted misspelled words, and the spans of all their occurrences
    """
    misspelled: set[str] = set()
    seen: set[str] = set()
    spans: list[Span] = []
    for match in WordPos(text, language):
        word = match.s
        if word in seen:
            if word in misspelled:
                spans.append((match.start, match.end))
            continue
        seen.add(word)
        if not dictionary.check(word):
            misspelled.add(word)
            spans.append((match.start, match.end))
    return sorted(misspelled), spans


class SpellingCtxtRule(Rule):
    name = "spelling-ctxt"

    def check_ctxt(self, ctx: "RuleContext", entry: "Entry", msgctxt: str) -> None:
        if ctx.dict_id is None:
            return
        words, spans = check_words(msgctxt, entry.format_language, ctx.dict_id)
        if words:
            ctx.report_ctxt(f"misspelled words in context: {', '.join(words)}", msgctxt, spans)
            ctx.add_misspelled_words(words)


class SpellingIdRule(Rule):
    name = "spelling-id"

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if ctx.dict_id is None:
            return
        words, spans = check_words(msgid, entry.format_language, ctx.dict_id)
        if words:
            ctx.report_msg(
                f"misspelled words in source: {', '.join(words)}", msgid, spans, msgstr, []
            )
            ctx.add_misspelled_words(words)


class SpellingStrRule(Rule):
    name = "spelling-str"

    def check_msg(self, ctx: "RuleContext", entry: "Entry", msgid: str, msgstr: str) -> None:
        if ctx.dict_str is None:
            return
        words, spans = check_words(msgstr, entry.format_language, ctx.dict_str)
        if words:
            ctx.report_msg(
                f"misspelled words in translation: {', '.join(words)}", msgid, [], msgstr, spans
            )
            ctx.add_misspelled_words(words)
