import math
from dataclasses import dataclass

from fastapi import Query

MAX_LIMIT = 100


@dataclass(frozen=True)
class Page:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)


def page_params(default_limit: int = 10):
    """Build a dependency reading ?page=&limit= with a per-route default limit."""

    def dependency(
        page: int = Query(default=1, ge=1),
        limit: int = Query(default=default_limit, ge=1, le=MAX_LIMIT),
    ) -> Page:
        return Page(page=page, limit=limit)

    return dependency
