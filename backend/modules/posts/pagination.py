"""
Page slicing for the post feed.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class PageWindow:
    """Offset/limit pair for one page."""
    offset: int
    limit: int


def paginate(total_count: int, page: int, per_page: int) -> PageWindow:
    """
    Compute the slice for a 1-indexed page.

    Pages past the end simply produce an offset beyond total_count; the
    caller returns an empty page for those.
    """
    return PageWindow(offset=max(0, page - 1) * per_page, limit=per_page)


def parse_page(raw: Optional[Any]) -> int:
    """Coerce a page parameter, defaulting to 1 when absent or invalid."""
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1
