"""filejail entry point.

Usage: ``filejail [ROOT]``. ROOT is the directory to expose; without it the
``FILEJAIL_ROOT_DIRECTORY`` variable or the current directory is used.
"""

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

from pydantic import ValidationError

from filejail.config import init_settings
from filejail.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return get_version("filejail")
    except PackageNotFoundError:
        from filejail import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filejail",
        description="Browse and manage the files under one directory over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  filejail /srv/share                Serve /srv/share on 127.0.0.1:8888
  filejail /srv/share --port 9000    Serve on another port
  filejail . --static-dir ./web      Also serve a front-end from ./web
""",
    )
    parser.add_argument("root", nargs="?", default=None, help="Root directory to expose")
    parser.add_argument("--host", type=str, default=None, help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port (default: 8888)")
    parser.add_argument(
        "--static-dir", type=str, default=None, help="Serve a front-end (index.html) from here"
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {_version()}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    if args.root is None and "FILEJAIL_ROOT_DIRECTORY" not in os.environ:
        logger.warning("No root directory provided. Using the current directory %s", os.getcwd())

    try:
        settings = init_settings(
            args.root, host=args.host, port=args.port, static_dir=args.static_dir
        )
    except ValidationError as e:
        logger.error("Invalid configuration:\n%s", e)
        return 2

    if not settings.root_directory.is_dir():
        logger.error("Root directory does not exist: %s", settings.root_directory)
        return 2

    from filejail.api.serve import run_api_server

    try:
        run_api_server(settings, dev=args.dev)
    except KeyboardInterrupt:
        logger.info("Stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
