# Common API response schemas.
# Created: 2026-10-07

from __future__ import annotations

from pydantic import BaseModel


class APIResponse(BaseModel):
    """Base response wrapper."""

    model_config = {"from_attributes": True}


class ErrorResponse(APIResponse):
    """Standard error envelope (FastAPI ``HTTPException`` shape)."""

    detail: str


class SuccessResponse(APIResponse):
    """Simple success response."""

    success: bool = True
