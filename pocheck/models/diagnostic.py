"""Diagnostic model produced by the rules.

Highlights are stored as byte offsets into the UTF-8 encoding of each line,
which is what the rules compute. They are converted to character offsets
only when a diagnostic is serialized (``model_dump`` / ``model_dump_json``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..utils.offsets import Span, byte_len, spans_to_char_offsets
from .enums import Severity


class DiagnosticLine(BaseModel):
    """One line of context attached to a diagnostic.

    A line number of ``0`` marks a separator line without content.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    line_number: int = Field(ge=0)
    message: str
    highlights: List[Tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_highlights(self) -> "DiagnosticLine":
        size = byte_len(self.message)
        for start, end in self.highlights:
            if not 0 <= start <= end <= size:
                raise ValueError(
                    f"highlight ({start}, {end}) out of bounds for a line of {size} bytes"
                )
        return self

    @field_serializer("highlights")
    def _highlights_as_chars(self, highlights: List[Tuple[int, int]]) -> List[List[int]]:
        return [list(span) for span in spans_to_char_offsets(self.message, highlights)]


class Diagnostic(BaseModel):
    """A problem reported by a rule for one catalog file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str
    rule: str
    severity: Severity
    message: str
    lines: List[DiagnosticLine] = Field(default_factory=list)

    @field_validator("path", mode="before")
    def _path_as_str(cls, value: object) -> str:
        if isinstance(value, Path):
            return str(value)
        return str(value or "")

    @field_validator("rule", "message", mode="before")
    def _strip_strings(cls, value: object) -> str:
        return str(value or "").strip()

    @model_validator(mode="after")
    def final_checks(self) -> "Diagnostic":
        if not self.rule:
            raise ValueError("rule must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        return self

    @classmethod
    def build(
        cls,
        path: str | Path,
        rule: str,
        severity: Severity,
        message: str,
        lines: Iterable[tuple[int, str, Iterable[Span]]] = (),
    ) -> "Diagnostic":
        """Create a diagnostic from ``(line_number, text, highlights)`` tuples."""
        return cls(
            path=path,
            rule=rule,
            severity=severity,
            message=message,
            lines=[
                DiagnosticLine(line_number=line_number, message=text, highlights=list(spans))
                for line_number, text, spans in lines
            ],
        )

    @property
    def line_numbers(self) -> tuple[int, ...]:
        """Line numbers of the context lines, separators excluded."""
        return tuple(line.line_number for line in self.lines if line.line_number > 0)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json")
