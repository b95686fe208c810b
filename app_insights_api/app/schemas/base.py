"""Shared pydantic configuration for dashboard records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys.

    ``populate_by_name`` lets Python callers construct models with
    snake_case keyword arguments while JSON payloads and seed files
    keep their camelCase spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
