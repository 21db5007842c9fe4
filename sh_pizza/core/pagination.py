"""Pagination — page/limit arithmetic shared by all listing endpoints.

Invariants:
    - page is 1-based; offset = (page - 1) * limit
    - total_pages = ceil(total / limit), 0 when there are no rows
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageRequest:
    """Validated page/limit pair."""
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def pagination_envelope(request: PageRequest, total: int) -> dict:
    """Build the `pagination` object returned next to a listing."""
    return {
        "page": request.page,
        "limit": request.limit,
        "total": total,
        "total_pages": total_pages(total, request.limit),
    }
