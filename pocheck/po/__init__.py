"""PO catalog model and parser."""

from __future__ import annotations

from .entry import Entry
from .escape import escape, unescape
from .format import Language
from .message import Message
from .parser import Parser

__all__ = ["Entry", "Language", "Message", "Parser", "escape", "unescape"]
