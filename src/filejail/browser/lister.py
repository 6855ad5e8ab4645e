# Directory listing of immediate children.
# Created: 2026-10-03

from __future__ import annotations

import logging
import os
from pathlib import Path

from filejail.browser.errors import FileOpsError, NotFoundError
from filejail.browser.models import Entry

logger = logging.getLogger(__name__)


def list_directory(directory: Path) -> list[Entry]:
    """List the immediate children of *directory*.

    Folders come first (with the trailing ``/`` display marker), then files.
    Each group is in name order; the final order is decided by the view.

    Raises:
        NotFoundError: If *directory* is missing or not a directory.
        FileOpsError: For any other OS failure (permissions, I/O).
    """
    folders: list[Entry] = []
    files: list[Entry] = []
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda e: e.name)
        for child in children:
            try:
                st = child.stat()
            except OSError as e:
                # Removed mid-listing, a dangling link or a symlink loop
                logger.debug("Skipping unreadable entry %s: %s", child.path, e.strerror or e)
                continue
            if child.is_dir():
                folders.append(Entry.folder(child.name, st, marker=True))
            else:
                files.append(Entry.file(child.name, st))
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFoundError("Directory doesn't exist") from e
    except OSError as e:
        logger.error("Failed to list %s: %s", directory, e)
        raise FileOpsError("list directory", e) from e

    logger.debug("Listed %s: %d folders, %d files", directory, len(folders), len(files))
    return folders + files
