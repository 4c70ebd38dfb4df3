"""Validation helpers — first-error collapsing and the ?categoryId= filter parser."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from notebox.core.errors import ValidationError
from notebox.core.validation import first_validation_error, parse_category_filter
from notebox.schemas.note import NoteCreate


def test_strips_body_prefix_from_field():
    err = first_validation_error([
        {"loc": ("body", "name"), "msg": "Field required", "type": "missing"},
    ])
    assert err.field == "name"
    assert err.message == "Field required"


def test_strips_query_prefix_from_field():
    err = first_validation_error([
        {"loc": ("query", "categoryId"), "msg": "bad", "type": "int_parsing"},
    ])
    assert err.field == "categoryId"


def test_nested_path_joined_with_dots():
    err = first_validation_error([
        {"loc": ("body", "tags", 0), "msg": "bad", "type": "x"},
    ])
    assert err.field == "tags.0"


def test_whole_body_error_keeps_location():
    err = first_validation_error([
        {"loc": ("body",), "msg": "Field required", "type": "missing"},
    ])
    assert err.field == "body"


def test_only_first_error_reported():
    err = first_validation_error([
        {"loc": ("body", "title"), "msg": "first", "type": "x"},
        {"loc": ("body", "content"), "msg": "second", "type": "x"},
    ])
    assert (err.field, err.message) == ("title", "first")


def test_value_error_prefix_removed():
    err = first_validation_error([
        {"loc": ("name",), "msg": "Value error, name cannot be null", "type": "value_error"},
    ])
    assert err.message == "name cannot be null"


def test_empty_error_list():
    err = first_validation_error([])
    assert err.message == "Invalid request data"


def test_works_with_pydantic_errors():
    with pytest.raises(PydanticValidationError) as exc_info:
        NoteCreate.model_validate({"title": "   ", "content": "C"})
    err = first_validation_error(exc_info.value.errors())
    assert err.field == "title"
    assert err.message == "title cannot be empty or whitespace"


@pytest.mark.parametrize("raw", [None, "", "  ", "0"])
def test_category_filter_missing_empty_or_zero_means_all(raw):
    assert parse_category_filter(raw) is None


def test_category_filter_parses_id():
    assert parse_category_filter("12") == 12


@pytest.mark.parametrize("raw", ["abc", "-1", "2147483648", "99999999999999999999"])
def test_category_filter_rejects_invalid(raw):
    with pytest.raises(ValidationError) as exc_info:
        parse_category_filter(raw)
    assert exc_info.value.field == "categoryId"
