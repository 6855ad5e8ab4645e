# Browser error taxonomy.
# Created: 2026-10-03
#
# Routers translate these into HTTP status codes per endpoint; the core never
# imports FastAPI.

from __future__ import annotations


class BrowserError(Exception):
    """Base class for all file-browser failures."""


class ConfinementError(BrowserError):
    """Raised when a client path resolves outside the configured root."""

    def __init__(self, message: str = "Path access outside of root is not allowed") -> None:
        super().__init__(message)


class NotFoundError(BrowserError):
    """Raised when a file or directory does not exist."""


class InvalidArgumentError(BrowserError):
    """Raised for unusable arguments (unknown action, bad page size, blank name)."""


class FileOpsError(BrowserError):
    """Raised when the operating system rejects a filesystem operation.

    The underlying ``OSError`` is chained as ``__cause__``. The message carries
    only the OS error text so absolute paths are not echoed to clients.
    """

    def __init__(self, action: str, error: OSError) -> None:
        self.action = action
        self.errno = error.errno
        reason = error.strerror or error.__class__.__name__
        super().__init__(f"Failed to {action}: {reason}")
