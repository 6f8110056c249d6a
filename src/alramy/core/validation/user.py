"""User validation schemas."""

from typing import Annotated

from alramy.core.models.user import UserRole
from alramy.core.validation.base import PartialSchema, Schema
from alramy.core.validation.fields import Email, Name, NotNull, Password, Uuid


class UserSchema(Schema):
    """Canonical user shape."""

    id: Uuid
    email: Email
    name: Name | None
    role: UserRole


class UserCreate(Schema):
    """Request schema for creating a user."""

    email: Email
    password: Password
    name: Annotated[Name | None, NotNull] = None


class UserUpdate(PartialSchema):
    """Request schema for updating a user."""

    email: Annotated[Email | None, NotNull] = None
    name: Annotated[Name | None, NotNull] = None
    role: Annotated[UserRole | None, NotNull] = None
