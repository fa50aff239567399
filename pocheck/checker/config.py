"""Configuration for catalog checks.

Defaults can be overridden with environment variables, which may be loaded
from a ``.env`` file by the command line entry point.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# Language of the sources, used by the spelling-ctxt and spelling-id rules.
DEFAULT_LANG_ID = "en_US"

ENV_LANG_ID = "POCHECK_LANG_ID"
ENV_PATH_WORDS = "POCHECK_PATH_WORDS"
ENV_SELECT = "POCHECK_SELECT"
ENV_IGNORE = "POCHECK_IGNORE"

# Extension of the personal word lists found in the words directory.
WORDS_FILE_SUFFIX = ".dic"

# LanguageTool server settings used for spell checking.
LANGUAGE_TOOL_CONFIG = {
    "requestLimitPeriodInSeconds": 60,
    "maxCheckTimeMillis": 120000,
}

# Only these LanguageTool issue types count as misspellings.
MISSPELLING_ISSUE_TYPES = {"misspelling"}


@dataclass(frozen=True)
class CheckOptions:
    """Options shared by all the files checked in a run."""

    fuzzy: bool = False
    noqa: bool = False
    obsolete: bool = False
    lang_id: str = DEFAULT_LANG_ID
    path_words: Path | None = None
    max_workers: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "CheckOptions":
        """Build options from environment variables, then apply ``overrides``.

        Overrides set to ``None`` are ignored so that unset command line
        arguments keep the environment value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        lang_id = env.get(ENV_LANG_ID, "").strip()
        if lang_id:
            values["lang_id"] = lang_id
        path_words = env.get(ENV_PATH_WORDS, "").strip()
        if path_words:
            values["path_words"] = Path(path_words)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
