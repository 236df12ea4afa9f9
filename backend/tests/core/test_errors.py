"""Error Hierarchy: status codes and response envelope per error type."""

from folio.core.errors import (
    ConcurrencyError, ContentValidationError, DuplicateSlugError, ErrorCategory,
    InvalidCredentialsError, PortfolioError, ResourceNotFoundError,
    StorageUnavailableError, UnauthorizedError,
)


def test_http_status_per_error():
    assert ContentValidationError("bad", field="title").http_status == 400
    assert DuplicateSlugError("hello").http_status == 400
    assert InvalidCredentialsError().http_status == 401
    assert UnauthorizedError().http_status == 401
    assert ResourceNotFoundError("Blog", "x").http_status == 404
    assert ConcurrencyError("moved").http_status == 409
    assert StorageUnavailableError("down", "execute").http_status == 500


def test_all_errors_share_the_base():
    for exc in (
        ContentValidationError("bad"), DuplicateSlugError("s"),
        UnauthorizedError(), StorageUnavailableError("x", "y"),
    ):
        assert isinstance(exc, PortfolioError)


def test_duplicate_slug_envelope_names_the_slug_field():
    body = DuplicateSlugError("my-post").to_response()["error"]
    assert body["code"] == "DUPLICATE_SLUG"
    assert "my-post" in body["message"]
    assert body["context"]["field"] == "slug"
    assert body["context"]["resource"] == "Blog"


def test_not_found_envelope_carries_resource():
    body = ResourceNotFoundError("Project", "abc").to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["resource_id"] == "abc"


def test_storage_error_message_is_generic():
    exc = StorageUnavailableError("Connection or operational error", "execute")
    assert exc.message == "Storage execute failed: Connection or operational error"
