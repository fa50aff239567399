"""Spelling dictionaries backed by LanguageTool.

This module centralises LanguageTool instantiation so that personal word
lists and shared configuration stay in one place. Rules only see the
:class:`SpellingDictionary` protocol: ``check(word) -> bool``.
"""

from __future__ import annotations

import logging
import random
import time
from pathlib import Path
from typing import Any, Callable, Protocol

import language_tool_python
from language_tool_python.exceptions import LanguageToolError

from .config import LANGUAGE_TOOL_CONFIG, MISSPELLING_ISSUE_TYPES, WORDS_FILE_SUFFIX

LOGGER = logging.getLogger(__name__)

# Transient errors that should trigger a retry. language_tool_python wraps
# connection-level errors in LanguageToolError.
TRANSIENT_ERRORS = (
    ConnectionError,
    TimeoutError,
    LanguageToolError,
)


class SpellingDictionary(Protocol):
    def check(self, word: str) -> bool:
        """Return True when ``word`` is spelled correctly."""
        ...


class DictionaryNotFoundError(RuntimeError):
    """Raised when no dictionary can be built for a language."""

    def __init__(self, language: str, reason: str | None = None) -> None:
        self.language = language
        self.reason = reason
        super().__init__(f"dictionary not found for language '{language}', spelling rule ignored")


def _retry_with_backoff(
    func: Callable[[Any], Any],
    func_arg: Any,
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
) -> Any:
    """Execute a function with exponential backoff retry logic.

    Args:
        func: The function to call (e.g., tool.check)
        func_arg: The argument to pass to func (e.g., a word)
        max_retries: Maximum number of retry attempts (total attempts = max_retries + 1)
        base_delay: Initial delay in seconds
        max_delay: Maximum delay in seconds

    Returns:
        The return value of func

    Raises:
        The last exception if all retries fail
    """
    for attempt in range(max_retries + 1):
        try:
            return func(func_arg)
        except TRANSIENT_ERRORS as exc:
            if attempt >= max_retries:
                LOGGER.error("Spell check failed after %d attempt(s): %s", attempt + 1, exc)
                raise
            delay = base_delay * (2**attempt)
            # Small random jitter to avoid a thundering herd
            delay = min(delay * random.uniform(0.75, 1.25), max_delay)
            LOGGER.warning(
                "Spell check attempt %d failed (transient error: %s); retrying in %.1f second(s)...",
                attempt + 1,
                type(exc).__name__,
                delay,
            )
            time.sleep(delay)
    raise RuntimeError("Retry logic completed without returning or raising")


class LanguageToolDictionary:
    """Check single words with a LanguageTool instance, caching the answers."""

    def __init__(self, tool: Any, language: str) -> None:
        self.tool = tool
        self.language = language
        self._cache: dict[str, bool] = {}

    def check(self, word: str) -> bool:
        cached = self._cache.get(word)
        if cached is not None:
            return cached
        matches = _retry_with_backoff(self.tool.check, word)
        result = not any(
            getattr(match, "ruleIssueType", None) in MISSPELLING_ISSUE_TYPES for match in matches
        )
        self._cache[word] = result
        return result

    def close(self) -> None:
        close = getattr(self.tool, "close", None)
        if close is not None:
            close()


class DictionaryManager:
    """Factory responsible for configuring LanguageTool dictionaries."""

    def __init__(
        self,
        *,
        path_words: Path | None = None,
        config: dict[str, Any] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.path_words = path_words
        self.logger = logger or LOGGER
        self.config = dict(config) if config is not None else dict(LANGUAGE_TOOL_CONFIG)

    @staticmethod
    def language_tags(language: str) -> list[str]:
        """LanguageTool tags to try for a PO language, most specific first.

        ``pt_BR`` gives ``["pt-BR", "pt"]``.
        """
        language = language.strip()
        if not language:
            return []
        tags = [language.replace("_", "-")]
        base = language.split("_", 1)[0]
        if base != language:
            tags.append(base)
        return tags

    def read_words(self, language: str) -> list[str]:
        """Read the personal words for ``language`` and its base language."""
        if self.path_words is None:
            return []
        names = [language]
        base = language.split("_", 1)[0]
        if base != language:
            names.append(base)
        words: set[str] = set()
        for name in names:
            path = self.path_words / f"{name}{WORDS_FILE_SUFFIX}"
            if not path.is_file():
                continue
            self.logger.debug("Reading personal words from %s", path)
            with path.open(encoding="utf-8") as handle:
                words.update(line.strip() for line in handle if line.strip())
        return sorted(words)

    def build_tool(self, tag: str, new_spellings: list[str] | None = None) -> Any:
        """Build a LanguageTool instance for ``tag``."""
        kwargs: dict[str, Any] = {}
        if self.config:
            kwargs["config"] = self.config
        if new_spellings:
            kwargs["newSpellings"] = new_spellings
            kwargs["new_spellings_persist"] = False
        try:
            return language_tool_python.LanguageTool(tag, **kwargs)
        except TypeError:
            if "config" not in kwargs:
                raise
            # Older language_tool_python versions do not accept config.
            kwargs.pop("config")
            self.logger.info("LanguageTool does not accept 'config', using the default constructor")
            return language_tool_python.LanguageTool(tag, **kwargs)

    def get_dictionary(self, language: str) -> LanguageToolDictionary:
        """Return a dictionary for ``language`` (e.g. ``fr`` or ``pt_BR``).

        Raises:
            DictionaryNotFoundError: If LanguageTool supports neither the
                language nor its base language.
        """
        new_spellings = self.read_words(language) if language.strip() else []
        last_error: Exception | None = None
        for tag in self.language_tags(language):
            try:
                tool = self.build_tool(tag, new_spellings)
            except (ValueError, LanguageToolError) as exc:
                self.logger.debug("No LanguageTool dictionary for %s: %s", tag, exc)
                last_error = exc
                continue
            self.logger.info("Using LanguageTool dictionary %s for language '%s'", tag, language)
            return LanguageToolDictionary(tool, tag)
        raise DictionaryNotFoundError(language, str(last_error) if last_error else None)
