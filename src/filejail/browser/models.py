# Value objects produced by listing, search and the view builder.
# Created: 2026-10-03

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

# Display marker appended to folder names in top-level listings.
FOLDER_MARKER = "/"


class EntryKind(str, Enum):
    """Kind of filesystem entry."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class Entry:
    """A single file or folder as surfaced by listing or search.

    ``size`` is set for files and ``None`` for folders.
    """

    name: str
    kind: EntryKind
    size: int | None
    last_modified: datetime

    def __post_init__(self) -> None:
        if (self.size is not None) != (self.kind is EntryKind.FILE):
            raise ValueError(f"{self.kind} entry {self.name!r} has inconsistent size {self.size!r}")
        if self.size is not None and self.size < 0:
            raise ValueError(f"Negative size for {self.name!r}")

    @classmethod
    def folder(cls, name: str, st: os.stat_result, *, marker: bool = False) -> Entry:
        display = name + FOLDER_MARKER if marker else name
        return cls(display, EntryKind.FOLDER, None, _mtime(st))

    @classmethod
    def file(cls, name: str, st: os.stat_result) -> Entry:
        return cls(name, EntryKind.FILE, st.st_size, _mtime(st))

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER

    @property
    def real_name(self) -> str:
        """Filesystem name with the folder display marker removed."""
        if self.is_folder and self.name.endswith(FOLDER_MARKER):
            return self.name[: -len(FOLDER_MARKER)]
        return self.name


@dataclass(frozen=True)
class ViewResult:
    """One sorted, paginated page of entries plus totals over the full set."""

    items: list[Entry]
    file_count: int
    folder_count: int
    total_size: int
    total_items: int
    page: int
    page_size: int
    total_pages: int
    sort_by: str
    sort_direction: str


@dataclass(frozen=True)
class DirectoryRef:
    """A move/copy destination candidate, addressed relative to the root."""

    name: str
    relative_path: str


def _mtime(st: os.stat_result) -> datetime:
    return datetime.fromtimestamp(st.st_mtime, tz=UTC)
