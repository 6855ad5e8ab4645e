# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-07
#
# The resolver and file service are built once in create_api_app() and
# injected per request from app.state.

from __future__ import annotations

from fastapi import HTTPException, Request

from filejail.browser import FileOpsService, PathResolver
from filejail.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_resolver(request: Request) -> PathResolver:
    return request.app.state.resolver


def get_file_ops(request: Request) -> FileOpsService:
    return request.app.state.file_ops


def require_param(value: str | None, detail: str) -> str:
    """Reject missing or whitespace-only query parameters with a 400."""
    if value is None or not value.strip():
        raise HTTPException(status_code=400, detail=detail)
    return value
