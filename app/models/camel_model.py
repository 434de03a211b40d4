from humps import camelize
from pydantic import BaseModel, ConfigDict


class CamelModel(BaseModel):
    """Base for wire models: camelCase aliases, built from dicts or entities."""

    model_config = ConfigDict(
        alias_generator=camelize, from_attributes=True, populate_by_name=True
    )
