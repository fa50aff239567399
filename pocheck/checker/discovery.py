"""Locate the PO catalogs to check."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

LOGGER = logging.getLogger(__name__)

PO_SUFFIX = ".po"


def find_po_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand files and directories into a sorted list of catalog paths.

    Files are kept whatever their extension; directories are searched
    recursively for ``*.po`` files. Paths that do not exist are kept so that
    the checker reports them as unreadable.
    """
    found: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            matches = [item for item in path.rglob(f"*{PO_SUFFIX}") if item.is_file()]
            LOGGER.debug("Found %d catalog(s) under %s", len(matches), path)
            found.update(matches)
        else:
            found.add(path)
    return sorted(found)
