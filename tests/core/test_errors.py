"""Error hierarchy — status codes and response bodies per error type."""

from notebox.core.errors import (
    DatabaseError, ErrorCategory, NoteboxError, NotFoundError,
    UniqueConstraintError, ValidationError,
)


def test_validation_error_body_carries_field():
    err = ValidationError("name cannot be empty or whitespace", "name")
    assert err.http_status == 400
    assert err.to_response() == {
        "message": "name cannot be empty or whitespace",
        "field": "name",
        "code": "VALIDATION_ERROR",
    }


def test_not_found_body_has_no_field():
    err = NotFoundError("Note", 7)
    assert err.http_status == 404
    assert err.to_response() == {
        "message": "Note not found", "code": "RESOURCE_NOT_FOUND",
    }
    assert err.resource_id == 7


def test_unique_constraint_is_conflict():
    err = UniqueConstraintError("Category", "name", "Work")
    assert err.http_status == 409
    assert err.category is ErrorCategory.CONFLICT
    assert err.to_response()["field"] == "name"
    assert "'Work'" in err.message


def test_database_error_is_service_unavailable():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.message.startswith("Database execute failed")


def test_all_errors_share_base():
    for err in (
        ValidationError("m", "f"),
        NotFoundError("Category", 1),
        UniqueConstraintError("Category", "name", "x"),
        DatabaseError("m", "commit"),
    ):
        assert isinstance(err, NoteboxError)
        assert str(err) == err.message
