"""Page resolution and slicing for list endpoints.

Query strings arrive unvalidated. Anything that is not a positive integer
falls back to a default, and the page size is always clamped to
[1, max_page_size].
"""

from collections.abc import Sequence
from typing import TypeVar

from postboard.schemas.common import PaginatedResponse

T = TypeVar("T")


def _parse_int(raw: str | int | None) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


def resolve_page(
    page: str | int | None,
    page_size: str | int | None,
    *,
    default_page_size: int,
    max_page_size: int,
) -> tuple[int, int]:
    """Turn raw page/pageSize query values into a usable (page, page_size).

    Returns:
        1-based page number and a page size within [1, max_page_size].
    """
    resolved_page = _parse_int(page)
    if resolved_page is None or resolved_page < 1:
        resolved_page = 1

    resolved_size = _parse_int(page_size)
    if resolved_size is None:
        resolved_size = default_page_size
    resolved_size = max(1, min(resolved_size, max_page_size))

    return resolved_page, resolved_size


def paginate(items: Sequence[T], page: int, page_size: int) -> PaginatedResponse[T]:
    """Slice one page out of an ordered collection.

    Args:
        items: Full ordered collection.
        page: 1-based page number (already resolved).
        page_size: Items per page (already clamped).
    """
    total = len(items)
    start = (page - 1) * page_size
    page_items = list(items[start : start + page_size])
    return PaginatedResponse(
        items=page_items,
        total=total,
        page=page,
        page_size=page_size,
        has_more=start + len(page_items) < total,
    )
