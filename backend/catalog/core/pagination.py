"""Pagination Math — pure offset/last-page helpers for list queries.

Invariants:
    - page and limit are >= 1 (validated upstream by PaginationParams)
    - last_page == ceil(total / limit); 0 when the table has no available rows
"""

import math


def compute_offset(page: int, limit: int) -> int:
    """Rows to skip before the requested page."""
    return (page - 1) * limit


def compute_last_page(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def build_page_meta(total: int, page: int, limit: int) -> dict:
    """Meta block returned next to a page of rows."""
    return {
        "total": total,
        "page": page,
        "last_page": compute_last_page(total, limit),
    }
