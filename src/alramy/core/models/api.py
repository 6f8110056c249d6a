"""API envelope and request parameter types.

Response envelopes:
- ApiResponse[T]:       {data, success, message?}
- ApiError:             {success: false, error, code?, details?}
- PaginatedResponse[T]: {data[], pagination: {total, page, pageSize, totalPages}}

Optional members are left out of the wire form when unset (see
``CamelModel.to_wire``).
"""

import math
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from alramy.core.models.base import CamelModel

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):
    """Successful response envelope."""

    data: T
    success: bool = True
    message: str | None = None


class ApiError(CamelModel):
    """Error response envelope."""

    success: Literal[False] = False
    error: str
    code: str | None = None
    details: dict[str, Any] | None = None


class PaginationMeta(CamelModel):
    """Pagination metadata."""

    total: int
    page: int
    page_size: int
    total_pages: int


class PaginatedResponse(CamelModel, Generic[T]):
    """Paginated list envelope."""

    data: list[T]
    pagination: PaginationMeta

    @classmethod
    def build(
        cls, items: list[T], total: int, page: int, page_size: int
    ) -> "PaginatedResponse[T]":
        """Wrap one page of items, deriving total_pages from total and page_size."""
        total_pages = math.ceil(total / page_size) if total > 0 else 0
        return cls(
            data=items,
            pagination=PaginationMeta(
                total=total,
                page=page,
                page_size=page_size,
                total_pages=total_pages,
            ),
        )


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PaginationParams(CamelModel):
    page: int | None = None
    page_size: int | None = None


class SortParams(CamelModel):
    sort_by: str | None = None
    sort_order: SortOrder | None = None


class FilterParams(CamelModel):
    search: str | None = None
    filters: dict[str, Any] | None = None
