"""Base schemas for common patterns."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Field names are snake_case in Python and camelCase on the wire and in
    stored records (``image_url`` <-> ``imageUrl``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both field names and aliases
        validate_assignment=True,  # Validate on attribute assignment
    )

    def to_json(self) -> str:
        """Serialize with camelCase keys, as stored in the key-value store."""
        return self.model_dump_json(by_alias=True)


class OkResponse(BaseModel):
    """Acknowledgement for mutations that return no item."""

    ok: Literal[True] = True


class ErrorBody(BaseModel):
    """Error response body."""

    error: str
    detail: str | None = None
