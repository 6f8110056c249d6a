"""Reusable field types for the validation schemas.

Strings, integers and booleans are strict: no coercion from other JSON types.
"""

import re
from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BeforeValidator, StrictInt, StringConstraints
from pydantic_core import PydanticCustomError

_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as exc:
        raise PydanticCustomError(
            "email", "Invalid email: {reason}", {"reason": str(exc)}
        ) from exc
    return value


def _integral_float(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _check_uuid(value: str) -> str:
    if not _UUID_RE.fullmatch(value):
        raise PydanticCustomError("uuid", "Invalid uuid")
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError(
            "not_nullable", "Field may be omitted but must not be null"
        )
    return value


# Integers arriving as JSON floats (2.0) are read as ints. Fractions still fail.
Integer = Annotated[StrictInt, BeforeValidator(_integral_float)]

# Marks an optional field: omission is allowed, an explicit null is not.
NotNull = BeforeValidator(_reject_null)

Email = Annotated[str, StringConstraints(strict=True), AfterValidator(_check_email)]
Uuid = Annotated[str, StringConstraints(strict=True), AfterValidator(_check_uuid)]

Password = Annotated[str, StringConstraints(strict=True, min_length=8, max_length=100)]
Name = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=100)]
Title = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=200)]
Slug = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=200)]
Body = Annotated[str, StringConstraints(strict=True, min_length=1)]
Excerpt = Annotated[str, StringConstraints(strict=True, max_length=500)]
Text = Annotated[str, StringConstraints(strict=True)]
