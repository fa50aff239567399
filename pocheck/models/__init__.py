"""Public model exports for the project.

Import from here: ``from pocheck.models import Diagnostic, Severity``.
"""

from __future__ import annotations

from .diagnostic import Diagnostic, DiagnosticLine
from .enums import Severity

__all__ = ["Diagnostic", "DiagnosticLine", "Severity"]
