"""filejail: browse a directory tree over HTTP without leaving it."""

__version__ = "0.1.0"
