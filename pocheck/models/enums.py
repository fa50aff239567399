"""Enumerations shared by the rules and the diagnostics."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity of a diagnostic, ordered ``INFO < WARNING < ERROR``.

    Values are the lower-case names used on the command line and in JSON
    output.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]

    @property
    def rank(self) -> int:
        return _RANKS[self]

    # str comparison would order the values alphabetically.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value


_RANKS = {Severity.INFO: 0, Severity.WARNING: 1, Severity.ERROR: 2}
