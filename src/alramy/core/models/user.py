"""User model types."""

from datetime import datetime
from enum import Enum

from alramy.core.models.base import CamelModel


class UserRole(str, Enum):
    """User role. Closed set."""

    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    USER = "USER"


class User(CamelModel):
    """User account."""

    id: str
    email: str
    name: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime
