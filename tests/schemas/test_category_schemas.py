"""Category schemas — create/update validation and camelCase serialization.

Invariants:
    - name required, stripped, non-blank; color #rgb/#rrggbb with #000000 default
    - CategoryUpdate dumps only the fields that were sent
    - explicit null rejected for name and color on update
"""

import pytest
from pydantic import ValidationError

from notebox.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate


def test_create_defaults_color():
    assert CategoryCreate(name="Work").color == "#000000"


def test_create_accepts_short_and_long_hex():
    assert CategoryCreate(name="A", color="#abc").color == "#abc"
    assert CategoryCreate(name="B", color="#A1B2C3").color == "#A1B2C3"


@pytest.mark.parametrize("color", ["red", "#12345", "123456", "#GGGGGG"])
def test_create_rejects_invalid_color(color):
    with pytest.raises(ValidationError):
        CategoryCreate(name="Work", color=color)


def test_create_requires_name():
    with pytest.raises(ValidationError) as exc_info:
        CategoryCreate.model_validate({})
    assert exc_info.value.errors()[0]["loc"] == ("name",)


def test_create_rejects_whitespace_name():
    with pytest.raises(ValidationError):
        CategoryCreate(name="   ")


def test_update_dumps_only_sent_fields():
    patch = CategoryUpdate.model_validate({"color": "#ffffff"})
    assert patch.model_dump(exclude_unset=True) == {"color": "#ffffff"}


def test_update_empty_body_is_empty_patch():
    assert CategoryUpdate.model_validate({}).model_dump(exclude_unset=True) == {}


@pytest.mark.parametrize("field", ["name", "color"])
def test_update_rejects_explicit_null(field):
    with pytest.raises(ValidationError) as exc_info:
        CategoryUpdate.model_validate({field: None})
    assert "cannot be null" in exc_info.value.errors()[0]["msg"]


def test_response_reads_orm_like_objects():
    class _Row:
        id = 3
        name = "Work"
        color = "#3b82f6"

    response = CategoryResponse.model_validate(_Row())
    assert response.model_dump(by_alias=True) == {
        "id": 3, "name": "Work", "color": "#3b82f6",
    }


def test_create_null_color_falls_back_to_default():
    assert CategoryCreate.model_validate({"name": "Work", "color": None}).color == "#000000"
