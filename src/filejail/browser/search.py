# Recursive, case-insensitive name search.
# Created: 2026-10-04
#
# Walks the whole subtree below the starting directory with an explicit
# stack, so deep trees never hit the interpreter recursion limit.

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from filejail.browser.models import Entry

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One scanned directory awaiting traversal."""

    subdirs: Iterator[tuple[os.DirEntry[str], os.stat_result]]
    files: list[tuple[os.DirEntry[str], os.stat_result]] = field(default_factory=list)


def recursive_search(directory: Path, term: str) -> list[Entry]:
    """Find every folder and file below *directory* whose name contains *term*.

    Traversal is depth-first pre-order: at each directory, every subdirectory
    is tested (and emitted on a match) and then searched in full before the
    directory's own files are tested. A matching folder never prunes its
    subtree.

    Folder entries carry the plain folder name, without the ``/`` display
    marker used by :func:`~filejail.browser.lister.list_directory`.

    A directory that cannot be read is logged and skipped; the rest of the
    walk continues. Symlinked directories are reported but not descended.
    """
    needle = term.lower()
    results: list[Entry] = []

    root = _scan(str(directory))
    stack = [root] if root is not None else []
    while stack:
        frame = stack[-1]
        nxt = next(frame.subdirs, None)
        if nxt is not None:
            child, st = nxt
            if needle in child.name.lower():
                results.append(Entry.folder(child.name, st))
            if not child.is_symlink():
                sub = _scan(child.path)
                if sub is not None:
                    stack.append(sub)
            continue

        for child, st in frame.files:
            if needle in child.name.lower():
                results.append(Entry.file(child.name, st))
        stack.pop()

    logger.debug("Search %r under %s: %d matches", term, directory, len(results))
    return results


def _scan(path: str) -> _Frame | None:
    """Read and stat one directory's children, or ``None`` if it is unreadable."""
    subdirs: list[tuple[os.DirEntry[str], os.stat_result]] = []
    files: list[tuple[os.DirEntry[str], os.stat_result]] = []
    try:
        with os.scandir(path) as it:
            children = sorted(it, key=lambda e: e.name)
        for child in children:
            try:
                st = child.stat()
            except OSError as e:
                logger.debug("Skipping unreadable entry %s: %s", child.path, e.strerror or e)
                continue
            if child.is_dir():
                subdirs.append((child, st))
            else:
                files.append((child, st))
    except OSError as e:
        logger.warning("Skipped: %s - %s", path, e.strerror or e)
        return None
    return _Frame(iter(subdirs), files)
