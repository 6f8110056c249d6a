"""Session helper for al-ramy.

Provides session lifecycle checks:
- Create: Build a session record expiring 7 calendar days from now
- Is valid: Check the record has not expired

Records are built per login and consulted per request. Nothing here persists,
renews or revokes them.

Calendar days are counted in the SESSION_TIMEZONE zone, so across a DST change
the record lives 7 days of wall-clock time rather than 7 x 24 hours.
"""

import logging
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from pydantic import ConfigDict

from alramy.app.config import get_settings
from alramy.core.logging_schema import LogEvent
from alramy.core.models.base import CamelModel
from alramy.core.models.user import UserRole
from alramy.core.validation import validate

logger = logging.getLogger(__name__)

SESSION_LIFETIME_DAYS = 7


class SessionData(CamelModel):
    """Authenticated session record."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str
    role: UserRole
    expires_at: datetime


def _as_aware(moment: datetime) -> datetime:
    # Naive datetimes are taken as UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def add_calendar_days(moment: datetime, days: int) -> datetime:
    """Move moment forward by whole calendar days, keeping its local time of day.

    The UTC offset of the result is recomputed from moment's tzinfo.
    """
    return datetime.combine(moment.date() + timedelta(days=days), moment.timetz())


def create_session(
    user_id: str,
    email: str,
    role: UserRole | str,
    *,
    now: datetime | None = None,
) -> SessionData:
    """Create a session record for a user.

    Args:
        user_id: User ID
        email: User email
        role: User role (enum member or its value)
        now: Creation moment (defaults to the current time)

    Returns:
        SessionData with expires_at 7 calendar days after now

    Raises:
        SchemaValidationError: If role is not a known UserRole
    """
    zone = ZoneInfo(get_settings().session.timezone)
    start = _as_aware(now).astimezone(zone) if now is not None else datetime.now(zone)
    expires_at = add_calendar_days(start, SESSION_LIFETIME_DAYS)

    session = validate(
        SessionData,
        {"userId": user_id, "email": email, "role": role, "expiresAt": expires_at},
    )
    logger.info(
        "Session created",
        extra={
            "event": LogEvent.SESSION_CREATED,
            "user_id": user_id,
            "expires_at": expires_at.isoformat(),
        },
    )
    return session


def is_session_valid(session: SessionData, *, now: datetime | None = None) -> bool:
    """Check if a session has not yet expired.

    Args:
        session: Session to check
        now: Moment to check at (defaults to the current time)

    Returns:
        True if now is strictly before session.expires_at
    """
    current = _as_aware(now) if now is not None else datetime.now(UTC)
    return current.astimezone(UTC) < _as_aware(session.expires_at).astimezone(UTC)
