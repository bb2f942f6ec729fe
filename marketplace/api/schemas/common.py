"""
Common API schemas.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from marketplace.application.interfaces.repositories import Page

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    message: str
    type: str


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response schema."""

    items: List[T]
    total: int
    page: int
    per_page: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page(cls, page: Page, items: List[T]) -> "PaginatedResponse[T]":
        return cls(
            items=items,
            total=page.total,
            page=page.page,
            per_page=page.per_page,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime
    updated_at: Optional[datetime] = None
