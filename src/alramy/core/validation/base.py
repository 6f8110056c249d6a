"""Schema base classes and the validate() entry point."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from alramy.core.errors import SchemaValidationError, ValidationIssue
from alramy.core.logging_schema import LogEvent

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseModel)

# pydantic error type -> rule name reported to callers
_RULE_NAMES = {
    "string_too_short": "too_short",
    "string_too_long": "too_long",
}


class Schema(BaseModel):
    """Inbound data shape.

    Input uses wire (camelCase) keys. Unknown keys are dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore", frozen=True)

    def normalized(self) -> dict[str, Any]:
        """Full JSON-ready value with defaults applied, keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)


class PartialSchema(Schema):
    """Update shape: every field optional, omission means unchanged."""

    def changes(self) -> dict[str, Any]:
        """Only the fields present in the input, keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def to_issues(errors: Sequence[Mapping[str, Any]]) -> list[ValidationIssue]:
    """Translate pydantic error dicts (ValidationError.errors()) into ValidationIssues."""
    issues = []
    for error in errors:
        rule = _RULE_NAMES.get(error["type"], error["type"])
        issues.append(
            ValidationIssue(
                path=list(error["loc"]),
                rule=rule,
                message=error["msg"],
                value=None if rule == "missing" else error.get("input"),
            )
        )
    return issues


def validate(schema: type[S], data: Any) -> S:
    """Validate data against schema.

    Returns:
        Parsed schema instance with defaults applied

    Raises:
        SchemaValidationError: If any field violates a rule; nothing is returned
    """
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        issues = to_issues(exc.errors())
        logger.debug(
            "Validation failed",
            extra={
                "event": LogEvent.VALIDATION_FAILED,
                "schema": schema.__name__,
                "issue_count": len(issues),
            },
        )
        raise SchemaValidationError(issues, schema=schema.__name__) from exc
