"""Path-confined listing, search and file operations.

The HTTP layer in :mod:`filejail.api` is a thin wrapper around these.
"""

from filejail.browser.errors import (
    BrowserError,
    ConfinementError,
    FileOpsError,
    InvalidArgumentError,
    NotFoundError,
)
from filejail.browser.lister import list_directory
from filejail.browser.models import DirectoryRef, Entry, EntryKind, ViewResult
from filejail.browser.ops import FileOpsService
from filejail.browser.resolver import PathResolver
from filejail.browser.search import recursive_search
from filejail.browser.view import build_view, sort_entries

__all__ = [
    "BrowserError",
    "ConfinementError",
    "DirectoryRef",
    "Entry",
    "EntryKind",
    "FileOpsError",
    "FileOpsService",
    "InvalidArgumentError",
    "NotFoundError",
    "PathResolver",
    "ViewResult",
    "build_view",
    "list_directory",
    "recursive_search",
    "sort_entries",
]
