"""HTTP server for filejail.

Builds the FastAPI application around one immutable :class:`Settings` value:
the path resolver and file service are created here, once, and handed to
request handlers through ``app.state``.
"""

from __future__ import annotations

import logging
import os

from filejail.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_api_app(settings: Settings | None = None):
    """Build the FastAPI application serving *settings.root_directory*."""
    from fastapi import FastAPI, Request
    from fastapi.exceptions import RequestValidationError
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from filejail import __version__
    from filejail.api.v1 import mount_v1_routers
    from filejail.browser import FileOpsService, PathResolver

    settings = settings or get_settings()

    app = FastAPI(
        title="filejail API",
        description="Browse, search and manage files below a single root directory.",
        version=__version__,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
    )

    resolver = PathResolver(settings.root_directory)
    app.state.settings = settings
    app.state.resolver = resolver
    app.state.file_ops = FileOpsService(resolver)

    # --- Malformed query parameters answer 400, not 422 ----------------
    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
        detail = f"Invalid {field}: {first.get('msg', 'malformed value')}"
        return JSONResponse(status_code=400, content={"detail": detail})

    # --- CORS -----------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # --- Mount all /api/v1/ routers -------------------------------------
    mount_v1_routers(app)

    # --- Optional front-end (index.html as the default document) --------
    if settings.static_dir is not None:
        from fastapi.staticfiles import StaticFiles

        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
        logger.info("Serving front-end from %s", settings.static_dir)

    logger.info("Root directory set to: %s", resolver.root)
    return app


def run_api_server(settings: Settings, dev: bool = False) -> None:
    """Start uvicorn. With *dev*, reload on source changes."""
    import uvicorn

    print(f"\n\U0001f4c2 Serving {settings.root_directory}")
    print(f"\U0001f310 API docs: http://{settings.host}:{settings.port}/api/v1/docs\n")

    if dev:
        import pathlib

        # The reloader re-imports the factory in a fresh process; the root
        # travels through the environment.
        os.environ["FILEJAIL_ROOT_DIRECTORY"] = str(settings.root_directory)
        if settings.static_dir is not None:
            os.environ["FILEJAIL_STATIC_DIR"] = str(settings.static_dir)

        src_dir = str(pathlib.Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "filejail.api.serve:create_api_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py"],
            log_level="debug",
        )
    else:
        app = create_api_app(settings)
        uvicorn.run(app, host=settings.host, port=settings.port)
