"""
Page/limit/skip arithmetic for paginated list endpoints.
"""
import math
from typing import Any, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_page_param(value: Optional[str], default: int) -> int:
    """
    Parse a page or limit query value.

    Absent, non-numeric and non-positive values fall back to ``default``.
    """
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed >= 1 else default


def compute_skip(page: int, limit: int) -> int:
    """Number of records to skip before the requested page."""
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def build_page(docs: list[Any], total: int, page: int, limit: int) -> dict[str, Any]:
    """
    Assemble the paginated result envelope.

    Args:
        docs: Records of the current page, in query order
        total: Count of all records matching the filter
        page: 1-based page number
        limit: Page size

    Returns:
        dict with docs, total, page, limit, totalPages, hasNextPage, hasPreviousPage
    """
    pages = total_pages(total, limit)
    return {
        "docs": docs,
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": pages,
        "hasNextPage": page < pages,
        "hasPreviousPage": page > 1,
    }
