"""Schema Base — camelCase JSON aliases and shared field types for every API model."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from notebox.core.domain_types import MAX_DB_ID

# Reference to a stored row: positive and within the 32-bit id column
DbId = Annotated[int, Field(gt=0, le=MAX_DB_ID)]


class ApiModel(BaseModel):
    """Base for request/response models. Accepts both alias and attribute names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def reject_null(value, field_name: str):
    """Explicit null on a non-nullable patch field is an error, not 'unchanged'."""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value


def strip_non_blank(value: str, field_name: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return value
