"""Validation Translation — collapses Pydantic error lists into one ValidationError.

Invariants:
    - Only the FIRST error is reported (client shows a single message)
    - Field path drops the request location prefix (body/query/path/header)
    - Pure functions: no IO, no FastAPI import
    - ?categoryId= that is missing, empty or 0 means "no filter"

Design Decisions:
    - Takes the plain list[dict] from errors(): works for both pydantic.ValidationError
      and fastapi RequestValidationError without importing either
"""

from typing import Any, Sequence

from notebox.core.domain_types import MAX_DB_ID
from notebox.core.errors import ValidationError

_LOCATION_PREFIXES = ("body", "query", "path", "header")
_VALUE_ERROR_PREFIX = "Value error, "


def first_validation_error(errors: Sequence[dict[str, Any]]) -> ValidationError:
    """Build a ValidationError from the first entry of a Pydantic error list."""
    if not errors:
        return ValidationError("Invalid request data", "")
    error = errors[0]
    return ValidationError(_clean_message(error.get("msg", "")), _field_path(error.get("loc", ())))


def _field_path(loc: Sequence[Any]) -> str:
    parts = list(loc)
    # Whole-body errors ("body" alone) keep the prefix so the field is never blank
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def _clean_message(msg: str) -> str:
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg or "Invalid value"


def parse_category_filter(raw: str | None) -> int | None:
    """Turn the raw ?categoryId= value into a filter id, or None for all notes."""
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(
            "Input should be a valid integer, unable to parse string as an integer",
            "categoryId",
        )
    if value < 0 or value > MAX_DB_ID:
        raise ValidationError(
            f"Input should be between 0 and {MAX_DB_ID}", "categoryId",
        )
    return value or None
