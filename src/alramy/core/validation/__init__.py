"""Validation schemas for inbound data.

Usage:
    from alramy.core.validation import PostCreate, validate

    post = validate(PostCreate, {"title": "Hi", "content": "body"})
    post.published  # False
"""

from alramy.core.validation.base import PartialSchema, Schema, to_issues, validate
from alramy.core.validation.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginationQuery,
)
from alramy.core.validation.post import PostCreate, PostSchema, PostUpdate
from alramy.core.validation.user import UserCreate, UserSchema, UserUpdate

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PaginationQuery",
    "PartialSchema",
    "PostCreate",
    "PostSchema",
    "PostUpdate",
    "Schema",
    "UserCreate",
    "UserSchema",
    "UserUpdate",
    "to_issues",
    "validate",
]
