"""Category Schemas — create/update input and response shape.

Invariants:
    - CategoryCreate.name: required, stripped, non-blank
    - color: #rgb or #rrggbb; absent or null on create -> DEFAULT_CATEGORY_COLOR
    - CategoryUpdate: every field optional, explicit null rejected
"""

from typing import Annotated

from pydantic import ConfigDict, Field, ValidationInfo, field_validator

from notebox.core.domain_types import DEFAULT_CATEGORY_COLOR, HEX_COLOR_PATTERN
from notebox.schemas.base import ApiModel, reject_null, strip_non_blank

HexColor = Annotated[str, Field(pattern=HEX_COLOR_PATTERN)]


class CategoryCreate(ApiModel):
    """Category creation — name required, color optional."""
    name: str
    color: HexColor | None = DEFAULT_CATEGORY_COLOR

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_non_blank(v, "name")

    @field_validator("color")
    @classmethod
    def default_null_color(cls, v: str | None) -> str:
        return DEFAULT_CATEGORY_COLOR if v is None else v


class CategoryUpdate(ApiModel):
    """Partial category update — only sent fields change."""
    name: str | None = None
    color: HexColor | None = None

    @field_validator("name", "color")
    @classmethod
    def not_null(cls, v, info: ValidationInfo):
        v = reject_null(v, info.field_name)
        if info.field_name == "name":
            return strip_non_blank(v, "name")
        return v


class CategoryResponse(ApiModel):
    """Category as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
