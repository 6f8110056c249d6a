"""Shared data shapes.

Plain pydantic models describing the entities and API envelopes exchanged
between the applications and the (external) persistence layer.
"""

from alramy.core.models.api import (
    ApiError,
    ApiResponse,
    FilterParams,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
    SortOrder,
    SortParams,
)
from alramy.core.models.content import Category, Comment, Post
from alramy.core.models.user import User, UserRole

__all__ = [
    "ApiError",
    "ApiResponse",
    "Category",
    "Comment",
    "FilterParams",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationParams",
    "Post",
    "SortOrder",
    "SortParams",
    "User",
    "UserRole",
]
