# File browser schemas.
# Created: 2026-10-07
#
# Field names are the camelCase wire names used by the browser front-end.

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from filejail.api.v1.schemas.common import APIResponse
from filejail.browser.models import DirectoryRef, Entry, ViewResult


class FileItem(BaseModel):
    """A single file or folder."""

    name: str
    type: Literal["file", "folder"]
    size: int | None = None
    lastModified: datetime

    @classmethod
    def from_entry(cls, entry: Entry) -> FileItem:
        return cls(
            name=entry.name,
            type=entry.kind.value,
            size=entry.size,
            lastModified=entry.last_modified,
        )


class FileListResponse(APIResponse):
    """One page of a directory listing or search, with totals over all matches."""

    path: str
    items: list[FileItem] = []
    fileCount: int = 0
    folderCount: int = 0
    totalSize: int = 0
    page: int = 1
    pageSize: int = 100
    totalItems: int = 0
    currentPage: int = 1
    totalPages: int = 0
    sortBy: str = "size"
    sortDirection: str = "asc"

    @classmethod
    def from_view(cls, path: str, view: ViewResult) -> FileListResponse:
        return cls(
            path=path,
            items=[FileItem.from_entry(e) for e in view.items],
            fileCount=view.file_count,
            folderCount=view.folder_count,
            totalSize=view.total_size,
            page=view.page,
            pageSize=view.page_size,
            totalItems=view.total_items,
            currentPage=view.page,
            totalPages=view.total_pages,
            sortBy=view.sort_by,
            sortDirection=view.sort_direction,
        )


class UploadResponse(APIResponse):
    """Name under which an upload was stored."""

    fileName: str


class DirectoryInfo(APIResponse):
    """A move/copy destination; ``fullPath`` is relative to the served root."""

    name: str
    fullPath: str

    @classmethod
    def from_ref(cls, ref: DirectoryRef) -> DirectoryInfo:
        return cls(name=ref.name, fullPath=ref.relative_path)
