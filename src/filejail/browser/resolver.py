"""Confinement of client-supplied paths to the configured root directory.

Every filesystem operation in filejail starts here. A client path is treated
as relative to the root even when it begins with a separator, is joined onto
the root and canonicalized (``.``, ``..`` and symlinks resolved). The result
is accepted only if it is the root itself or lies below it on a directory
boundary, so a root of ``/data`` never admits ``/data-secret``.

Created: 2026-10-03
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath

from filejail.browser.errors import ConfinementError, NotFoundError

logger = logging.getLogger(__name__)

_LEADING_SEPARATORS = "/\\"


class PathResolver:
    """Maps untrusted relative paths to absolute paths inside ``root``."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = Path(root).resolve()
        self._prefix = str(self._root).rstrip(os.sep) + os.sep

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, user_path: str) -> Path:
        """Resolve *user_path* against the root.

        Raises:
            ConfinementError: If the canonical path falls outside the root or
                cannot be represented on this filesystem.
        """
        relative = user_path.lstrip(_LEADING_SEPARATORS)
        try:
            candidate = (self._root / relative).resolve()
        except (ValueError, OSError) as e:
            # NUL bytes, over-long names, symlink loops
            logger.debug("Unresolvable path %r: %s", user_path, e)
            raise ConfinementError() from e

        if not self.contains(candidate):
            logger.warning("Rejected path outside root: %r", user_path)
            raise ConfinementError()
        return candidate

    def resolve_entry(self, user_path: str) -> Path:
        """Resolve *user_path* without following a symlink in its last component.

        The parent is canonicalized and confined; the final name is joined
        as-is, so operations on the result act on a link rather than its target.
        """
        relative = user_path.lstrip(_LEADING_SEPARATORS).rstrip("/")
        head, _, name = relative.rpartition("/")
        if name in ("", ".", ".."):
            return self.resolve(user_path)
        if "\x00" in name:
            raise ConfinementError()
        return self.resolve(head) / name

    def resolve_directory(self, user_path: str) -> Path:
        """Resolve *user_path* and require an existing directory."""
        path = self.resolve(user_path)
        if not path.is_dir():
            raise NotFoundError("Directory doesn't exist")
        return path

    def resolve_file(self, user_path: str) -> Path:
        """Resolve *user_path* and require an existing regular file."""
        path = self.resolve(user_path)
        if not path.is_file():
            raise NotFoundError("File doesn't exist")
        return path

    def contains(self, path: Path) -> bool:
        """True if canonical *path* is the root or a descendant of it."""
        text = str(path)
        return text == str(self._root) or text.startswith(self._prefix)

    def to_relative(self, path: Path) -> str:
        """Render a confined absolute path as a client path (``/a/b``)."""
        relative = path.relative_to(self._root)
        return str(PurePosixPath("/", *relative.parts))
