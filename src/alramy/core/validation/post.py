"""Post validation schemas."""

from typing import Annotated

from pydantic import StrictBool

from alramy.core.validation.base import PartialSchema, Schema
from alramy.core.validation.fields import (
    Body,
    Excerpt,
    NotNull,
    Slug,
    Text,
    Title,
    Uuid,
)


class PostSchema(Schema):
    """Canonical post shape. Content has no length bound here."""

    id: Uuid
    title: Title
    slug: Slug
    content: Text
    excerpt: Excerpt | None
    published: StrictBool
    author_id: Uuid


class PostCreate(Schema):
    """Request schema for creating a post."""

    title: Title
    content: Body
    excerpt: Annotated[Excerpt | None, NotNull] = None
    published: StrictBool = False


class PostUpdate(PartialSchema):
    """Request schema for updating a post."""

    title: Annotated[Title | None, NotNull] = None
    content: Annotated[Body | None, NotNull] = None
    excerpt: Annotated[Excerpt | None, NotNull] = None
    published: Annotated[StrictBool | None, NotNull] = None
