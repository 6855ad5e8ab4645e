"""filejail settings.

Settings come from ``FILEJAIL_*`` environment variables, overridden by
explicit values from the command line. The resulting object is frozen and
created once at startup; request handlers only ever read it.

Created: 2026-10-06
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Process-wide, read-only configuration."""

    model_config = SettingsConfigDict(env_prefix="FILEJAIL_", frozen=True, extra="ignore")

    root_directory: Path = Field(
        default_factory=Path.cwd,
        description="Directory exposed by the API; nothing outside it is reachable",
    )
    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=8888, ge=1, le=65535)
    default_page_size: int = Field(default=100, ge=1, description="pageSize when not given")
    static_dir: Path | None = Field(
        default=None, description="Optional front-end directory served at / (index.html)"
    )
    cors_allowed_origins: list[str] = Field(default_factory=list)

    @field_validator("root_directory", mode="after")
    @classmethod
    def _absolute_root(cls, v: Path) -> Path:
        return v.expanduser().resolve()

    @classmethod
    def load(cls, root_directory: str | Path | None = None, **overrides: Any) -> Settings:
        """Build settings from the environment plus explicit *overrides*.

        ``None`` overrides are ignored so unset CLI flags fall through to the
        environment or the defaults.
        """
        values = {k: v for k, v in overrides.items() if v is not None}
        if root_directory is not None:
            values["root_directory"] = Path(root_directory)
        return cls(**values)


_settings: Settings | None = None


def init_settings(root_directory: str | Path | None = None, **overrides: Any) -> Settings:
    """Create the process-wide settings. Call once, at startup."""
    global _settings
    if _settings is not None:
        raise RuntimeError("Settings are already initialized")
    _settings = Settings.load(root_directory, **overrides)
    return _settings


def get_settings() -> Settings:
    """Return the process-wide settings, loading them from the environment if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings (tests only)."""
    global _settings
    _settings = None
