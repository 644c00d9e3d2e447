"""Cursor-based pagination over lists of named items."""

from __future__ import annotations

import base64
import bisect
from typing import Any, Sequence, TypeVar

T = TypeVar("T")


def _name(item: Any) -> str:
    return item.name


def encode_cursor(name: str) -> str:
    """Encode an item name as an opaque cursor."""
    raw = name.encode("utf-8", errors="surrogateescape")
    return base64.b64encode(raw).decode("ascii")


def decode_cursor(cursor: str) -> str:
    """Decode a cursor back into the item name it points after.

    Raises ValueError when the cursor is not valid base64.
    """
    raw = base64.b64decode(cursor, validate=True)
    return raw.decode("utf-8", errors="surrogateescape")


def list_by_pagination(
    items: Sequence[T], cursor: str | None = "", limit: int | None = None
) -> tuple[list[T], str]:
    """Return one page of ``items`` (sorted by name) and the cursor of the next page.

    The page starts after the item named by ``cursor``. The next cursor is empty
    when there is no limit or the page came out shorter than the limit.
    """
    elements = list(items)
    start = 0
    if cursor:
        after = decode_cursor(cursor)
        start = bisect.bisect_right(elements, after, key=_name)
    end = len(elements)
    if limit is not None and len(elements) > start + limit:
        end = start + limit
    page = elements[start:end]
    next_cursor = ""
    if limit is not None and page and len(page) >= limit:
        next_cursor = encode_cursor(_name(page[-1]))
    return page, next_cursor