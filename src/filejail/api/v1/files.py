# File browser router: listing, search, transfers and file management.
# Created: 2026-10-08
#
# Handlers are async; every filesystem call goes through asyncio.to_thread
# so a long recursive search does not stall other requests.

from __future__ import annotations

import asyncio
import logging
from pathlib import PurePosixPath
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile

from filejail.api.deps import get_app_settings, get_file_ops, get_resolver, require_param
from filejail.api.v1.schemas.common import ErrorResponse, SuccessResponse
from filejail.api.v1.schemas.files import (
    DirectoryInfo,
    FileListResponse,
    UploadResponse,
)
from filejail.browser import (
    BrowserError,
    ConfinementError,
    FileOpsError,
    FileOpsService,
    InvalidArgumentError,
    NotFoundError,
    PathResolver,
    build_view,
    list_directory,
    recursive_search,
)
from filejail.browser.view import DEFAULT_SORT_BY, DEFAULT_SORT_DIRECTION
from filejail.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Files"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


def _to_http(exc: BrowserError, *, not_found_status: int = 400) -> HTTPException:
    """Map a browser error onto the status code this endpoint uses for it."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=not_found_status, detail=str(exc))
    if isinstance(exc, (ConfinementError, InvalidArgumentError)):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, FileOpsError):
        return HTTPException(status_code=500, detail=str(exc))
    logger.exception("Unhandled browser error")
    return HTTPException(status_code=500, detail="Internal error")


@router.get("/files", response_model=FileListResponse)
async def list_files(
    path: str | None = None,
    search: str | None = None,
    page: int = 1,
    page_size: int | None = Query(None, alias="pageSize"),
    sort_by: str = Query(DEFAULT_SORT_BY, alias="sortBy"),
    sort_direction: str = Query(DEFAULT_SORT_DIRECTION, alias="sortDirection"),
    resolver: PathResolver = Depends(get_resolver),
    settings: Settings = Depends(get_app_settings),
):
    """List a directory, or search its whole subtree when *search* is given."""
    path = require_param(path, "Missing path")
    if page_size is None:
        page_size = settings.default_page_size
    try:
        directory = await asyncio.to_thread(resolver.resolve_directory, path)
        if search:
            entries = await asyncio.to_thread(recursive_search, directory, search.lower())
        else:
            entries = await asyncio.to_thread(list_directory, directory)
        view = build_view(entries, sort_by, sort_direction, page, page_size)
    except BrowserError as e:
        raise _to_http(e) from e

    return FileListResponse.from_view(path, view)


@router.post("/files/upload", response_model=UploadResponse)
async def upload_file(
    path: str | None = None,
    file: UploadFile | None = File(None),
    file_ops: FileOpsService = Depends(get_file_ops),
):
    """Store an uploaded file in the directory *path*, replacing any existing file."""
    path = require_param(path, "Invalid Path")
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="Empty file")

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Empty file")

    try:
        entry = await asyncio.to_thread(file_ops.upload, path, file.filename, content)
    except BrowserError as e:
        raise _to_http(e) from e

    return UploadResponse(fileName=entry.name)


@router.get("/files/download", response_class=Response)
async def download_file(
    path: str | None = None,
    file_ops: FileOpsService = Depends(get_file_ops),
):
    """Return the raw bytes of a file as an attachment."""
    path = require_param(path, "Invalid file path")
    try:
        data = await asyncio.to_thread(file_ops.download, path)
    except BrowserError as e:
        raise _to_http(e) from e

    return Response(
        content=data,
        media_type="application/octet-stream",
        headers={"Content-Disposition": _attachment(_base_name(path))},
    )


@router.delete("/files/delete", response_model=SuccessResponse)
async def delete_path(
    path: str | None = None,
    file_ops: FileOpsService = Depends(get_file_ops),
):
    """Delete a file, or a folder with everything in it."""
    path = require_param(path, "Missing path")
    try:
        await asyncio.to_thread(file_ops.delete, path)
    except BrowserError as e:
        raise _to_http(e, not_found_status=404) from e
    return SuccessResponse()


@router.post("/files/action", response_model=SuccessResponse)
async def move_or_copy(
    source_path: str | None = Query(None, alias="sourcePath"),
    destination_path: str | None = Query(None, alias="destinationPath"),
    action: str = "",
    file_ops: FileOpsService = Depends(get_file_ops),
):
    """Move or copy a file or folder (``action`` is ``move`` or ``copy``)."""
    detail = "Missing source or destination path"
    source_path = require_param(source_path, detail)
    destination_path = require_param(destination_path, detail)
    try:
        await asyncio.to_thread(file_ops.move_or_copy, source_path, destination_path, action)
    except BrowserError as e:
        raise _to_http(e, not_found_status=404) from e
    return SuccessResponse()


@router.get("/files/directories", response_model=list[DirectoryInfo])
async def list_directories(
    root: str | None = None,
    file_ops: FileOpsService = Depends(get_file_ops),
):
    """Immediate subdirectories of *root*, for move/copy destination pickers."""
    root = require_param(root, "Invalid or missing root path")
    try:
        refs = await asyncio.to_thread(file_ops.list_subdirectories, root)
    except BrowserError as e:
        raise _to_http(e) from e
    return [DirectoryInfo.from_ref(r) for r in refs]


def _base_name(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).name or "download"


def _attachment(filename: str) -> str:
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'
