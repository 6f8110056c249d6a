"""Blog content model types (Post, Comment, Category)."""

from datetime import datetime

from alramy.core.models.base import CamelModel


class Post(CamelModel):
    """Blog post."""

    id: str
    title: str
    slug: str
    content: str
    excerpt: str | None
    published: bool
    author_id: str
    created_at: datetime
    updated_at: datetime


class Comment(CamelModel):
    """Comment on a post."""

    id: str
    content: str
    post_id: str
    author_id: str
    created_at: datetime
    updated_at: datetime


class Category(CamelModel):
    """Post category."""

    id: str
    name: str
    slug: str
    description: str | None
    created_at: datetime
    updated_at: datetime
