"""Response pieces shared by several use cases."""

import math

from pydantic import BaseModel, Field


class PageRequest(BaseModel):
    """Page-number pagination parameters."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    """Pagination block returned with every listing."""

    current: int
    pages: int
    total: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: PageRequest, total: int) -> "Pagination":
        """Compute pagination for a page of a listing with ``total`` items."""
        pages = math.ceil(total / page.limit) if total else 0
        return cls(
            current=page.page,
            pages=pages,
            total=total,
            has_next=page.page < pages,
            has_prev=page.page > 1,
        )
