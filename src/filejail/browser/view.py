# View builder: sort, paginate and aggregate a raw entry set.
# Created: 2026-10-04

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from filejail.browser.errors import InvalidArgumentError
from filejail.browser.models import Entry, EntryKind, ViewResult

DEFAULT_SORT_BY = "size"
DEFAULT_SORT_DIRECTION = "asc"

_SORT_KEYS: dict[str, Callable[[Entry], Any]] = {
    "name": lambda e: e.name,
    "date": lambda e: e.last_modified,
    # Folders have no size and sort as zero-byte entries.
    "size": lambda e: e.size or 0,
}


def sort_entries(entries: Sequence[Entry], sort_by: str, sort_direction: str) -> list[Entry]:
    """Stable-sort *entries*.

    Names compare on the displayed name, so marked folders interleave with
    files. An unrecognized *sort_by* falls back to ascending name order and
    ignores *sort_direction*. Any direction other than ``desc`` is ascending.
    """
    key = _SORT_KEYS.get(sort_by)
    if key is None:
        return sorted(entries, key=_SORT_KEYS["name"])
    return sorted(entries, key=key, reverse=sort_direction == "desc")


def build_view(
    entries: Sequence[Entry],
    sort_by: str = DEFAULT_SORT_BY,
    sort_direction: str = DEFAULT_SORT_DIRECTION,
    page: int = 1,
    page_size: int = 100,
) -> ViewResult:
    """Build one page of *entries* plus totals over the whole set.

    Pages are 1-based. Pages before the first are clamped to the first page's
    offset; pages past the end are empty.

    Raises:
        InvalidArgumentError: If *page_size* is not positive.
    """
    if page_size <= 0:
        raise InvalidArgumentError("pageSize must be a positive integer")

    ordered = sort_entries(entries, sort_by, sort_direction)
    skip = max(0, (page - 1) * page_size)
    files = [e for e in entries if e.kind is EntryKind.FILE]
    total = len(entries)

    return ViewResult(
        items=ordered[skip : skip + page_size],
        file_count=len(files),
        folder_count=total - len(files),
        total_size=sum(e.size or 0 for e in files),
        total_items=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
        sort_by=sort_by,
        sort_direction=sort_direction,
    )
