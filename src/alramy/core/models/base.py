"""Base model for shared types."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Shared shape serialized with camelCase keys.

    Accepts both the wire name (``authorId``) and the attribute name
    (``author_id``) on construction.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump to a JSON-ready dict using wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
