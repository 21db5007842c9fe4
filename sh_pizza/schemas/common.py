"""Shared Schema Pieces — camelCase base model, pagination, message envelopes.

Invariants:
    - Every API schema inherits CamelModel (alias_generator=to_camel)
    - from_attributes enabled so ORM rows validate directly
    - StrippedModel trims str fields and maps blank strings to None, except
      passwords, which are taken verbatim
"""

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

_VERBATIM_FIELDS = frozenset({"password"})


class CamelModel(BaseModel):
    """Base for API contracts: camelCase aliases, accepts field names too."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class StrippedModel(CamelModel):
    """Request body whose blank strings count as missing."""

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v, info: ValidationInfo):
        if isinstance(v, str) and info.field_name not in _VERBATIM_FIELDS:
            v = v.strip()
            return v or None
        return v


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class MessageResponse(CamelModel):
    message: str
