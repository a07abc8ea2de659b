"""Tests for core exceptions."""

from conduit_service.core import exceptions as exc


def test_app_exception_defaults_title() -> None:
    error = exc.AppException(status_code=400, detail="bad")
    assert error.title == "Bad Request"
    assert error.type == "about:blank"
    assert error.extra == {}


def test_app_exception_unknown_status_title() -> None:
    assert exc.AppException(status_code=418, detail="teapot").title == "Error"


def test_not_found_exception_fields() -> None:
    error = exc.NotFoundException(detail="missing")
    assert error.status_code == 404
    assert error.type == "not-found"
    assert error.title == "Not Found"


def test_conflict_exception_fields() -> None:
    error = exc.ConflictException(detail="taken", type="article-exists")
    assert error.status_code == 409
    assert error.type == "article-exists"


def test_invalid_cursor_exception_merges_extra() -> None:
    error = exc.InvalidCursorException(cursor="abc", extra={"direction": "next"})
    assert isinstance(error, exc.BadRequestException)
    assert error.status_code == 400
    assert error.type == "invalid-cursor"
    assert error.cursor == "abc"
    assert error.extra == {"cursor": "abc", "direction": "next"}
    assert "cursor" in error.detail.lower()


def test_invalid_cursor_exception_custom_detail() -> None:
    error = exc.InvalidCursorException(cursor="abc", detail="Cursor expired")
    assert str(error) == "Cursor expired"
