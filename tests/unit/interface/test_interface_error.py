"""Unit tests for HTTP error translation."""

from uuid import uuid4

import pytest

from artbook.domain.error import (
    CommentHasRepliesError,
    DepthExceededError,
    DuplicateReportError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from artbook.domain.service import JWTService
from artbook.interface.error import (
    UnauthorizedError,
    internal_error,
    optional_user,
    require_user,
    to_http_exception,
)
from artbook.config import Settings


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(Settings().auth)


class TestToHttpException:
    def test_not_found_hides_identifier(self):
        exc = to_http_exception(NotFoundError("Comment", "abc"))

        assert exc.status_code == 404
        assert exc.detail == "Comment not found"

    def test_not_authorized_names_action(self):
        exc = to_http_exception(
            NotAuthorizedError("comment", "abc", "user-1", action="delete")
        )

        assert exc.status_code == 403
        assert exc.detail == "Not authorized to delete this comment"

    def test_validation_is_bad_request(self):
        exc = to_http_exception(ValidationError("Comment content cannot be empty"))

        assert exc.status_code == 400
        assert exc.detail == "Comment content cannot be empty"

    @pytest.mark.parametrize(
        "error",
        [
            DepthExceededError(2),
            CommentHasRepliesError("abc"),
            DuplicateReportError("art-1", "user-1"),
        ],
    )
    def test_conflicts(self, error):
        assert to_http_exception(error).status_code == 409

    def test_unauthorized(self):
        exc = to_http_exception(UnauthorizedError("Authentication required to comment"))

        assert exc.status_code == 401

    def test_internal_error_hides_cause(self):
        exc = internal_error("Failed to create comment", RuntimeError("db down"))

        assert exc.status_code == 500
        assert exc.detail == "Failed to create comment"


class TestSessionHelpers:
    def test_require_user_rejects_missing_token(self, jwt_service):
        with pytest.raises(UnauthorizedError):
            require_user(jwt_service, None, "comment")

    def test_require_user_rejects_garbage(self, jwt_service):
        with pytest.raises(UnauthorizedError):
            require_user(jwt_service, "not-a-jwt", "comment")

    def test_valid_token_yields_user(self, jwt_service):
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id)

        assert require_user(jwt_service, token, "comment") == user_id
        assert optional_user(jwt_service, token) == user_id

    def test_optional_user_allows_anonymous(self, jwt_service):
        assert optional_user(jwt_service, None) is None
