# File operations: upload, download, delete, move and copy.
# Created: 2026-10-05
#
# Each operation resolves its own paths through the PathResolver before it
# touches the filesystem. Writes are last-writer-wins; there is no locking.

from __future__ import annotations

import errno
import logging
import os
import posixpath
import shutil
from pathlib import PurePosixPath

from filejail.browser.errors import FileOpsError, InvalidArgumentError, NotFoundError
from filejail.browser.models import DirectoryRef, Entry
from filejail.browser.resolver import PathResolver

logger = logging.getLogger(__name__)

ACTIONS = ("move", "copy")


class FileOpsService:
    """Mutating and transfer operations over a confined root."""

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    def upload(self, directory: str, file_name: str, content: bytes) -> Entry:
        """Write *content* to ``directory/file_name``, replacing any existing file.

        Only the base name of *file_name* is used, so a client cannot smuggle
        separators into the target path.
        """
        name = PurePosixPath(file_name.replace("\\", "/")).name
        if name in ("", ".", ".."):
            raise InvalidArgumentError("Invalid file name")

        folder = self._resolver.resolve_directory(directory)
        target = self._resolver.resolve(posixpath.join(self._resolver.to_relative(folder), name))
        try:
            target.write_bytes(content)
            st = target.stat()
        except OSError as e:
            logger.error("Upload to %s failed: %s", target, e)
            raise FileOpsError("upload file", e) from e

        logger.info("Uploaded %s (%d bytes)", target, len(content))
        return Entry.file(name, st)

    def download(self, path: str) -> bytes:
        """Return the raw bytes of the file at *path*."""
        target = self._resolver.resolve_file(path)
        try:
            return target.read_bytes()
        except OSError as e:
            raise FileOpsError("read file", e) from e

    def delete(self, path: str) -> None:
        """Delete a file, or a directory and everything below it.

        A symlink is removed itself; its target is left alone.
        """
        target = self._resolver.resolve_entry(path)
        if target == self._resolver.root:
            raise InvalidArgumentError("The root directory cannot be deleted")

        try:
            if target.is_symlink():
                target.unlink()
            elif target.is_dir():
                shutil.rmtree(target)
            elif target.exists():
                target.unlink()
            else:
                raise NotFoundError("Folder or file does not exist")
        except OSError as e:
            logger.error("Delete of %s failed: %s", target, e)
            raise FileOpsError("delete", e) from e

        logger.info("Deleted %s", target)

    def move_or_copy(self, source: str, destination: str, action: str) -> None:
        """Move or copy *source* to *destination*.

        Moves are renames. Directory copies recreate the whole tree. A symlink
        is moved or copied as a link. An existing destination is never
        overwritten.
        """
        if action not in ACTIONS:
            raise InvalidArgumentError(f"Unknown action: {action!r}")

        src = self._resolver.resolve_entry(source)
        dst = self._resolver.resolve_entry(destination)
        if not os.path.lexists(src):
            raise NotFoundError("Source path not found")
        if src == self._resolver.root:
            raise InvalidArgumentError(f"The root directory cannot be the source of a {action}")
        real_dir = src.is_dir() and not src.is_symlink()
        if real_dir and dst.is_relative_to(src):
            raise InvalidArgumentError(f"Cannot {action} a directory into itself")

        try:
            if os.path.lexists(dst):
                raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST))
            if action == "move":
                os.rename(src, dst)
            elif real_dir:
                shutil.copytree(src, dst, symlinks=True)
            else:
                shutil.copy2(src, dst, follow_symlinks=False)
        except OSError as e:
            logger.error("%s %s -> %s failed: %s", action.capitalize(), src, dst, e)
            raise FileOpsError(action, e) from e

        logger.info("%s %s -> %s", "Moved" if action == "move" else "Copied", src, dst)

    def list_subdirectories(self, root: str) -> list[DirectoryRef]:
        """Immediate subdirectories of *root*, addressed relative to the jail root."""
        base = self._resolver.resolve_directory(root)
        try:
            with os.scandir(base) as it:
                names = sorted(e.name for e in it if e.is_dir())
        except OSError as e:
            raise FileOpsError("list directories", e) from e

        return [DirectoryRef(name, self._resolver.to_relative(base / name)) for name in names]

