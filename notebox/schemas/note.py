"""Note Schemas — create/update input and response shape.

Invariants:
    - NoteCreate.title: required, stripped, non-blank
    - NoteCreate.content: required, may be empty
    - categoryId: int in 1..MAX_DB_ID or null; numeric strings coerced ("3" -> 3)
    - isFavorite: bool, "true"/"false" coerced; defaults False on create
    - NoteUpdate: every field optional; null allowed only for categoryId (unlink)
    - createdAt is response-only; unknown input keys are ignored
"""

from datetime import datetime

from pydantic import ConfigDict, ValidationInfo, field_validator

from notebox.schemas.base import ApiModel, DbId, reject_null, strip_non_blank


class NoteCreate(ApiModel):
    """Note creation — title and content required."""
    title: str
    content: str
    category_id: DbId | None = None
    is_favorite: bool = False

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return strip_non_blank(v, "title")


class NoteUpdate(ApiModel):
    """Partial note update — only sent fields change."""
    title: str | None = None
    content: str | None = None
    category_id: DbId | None = None
    is_favorite: bool | None = None

    @field_validator("title", "content", "is_favorite")
    @classmethod
    def not_null(cls, v, info: ValidationInfo):
        v = reject_null(v, info.field_name)
        if info.field_name == "title":
            return strip_non_blank(v, "title")
        return v


class NoteResponse(ApiModel):
    """Note as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    category_id: int | None
    created_at: datetime
    is_favorite: bool
