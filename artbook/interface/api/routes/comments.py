"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from artbook.application.usecase.base import ApiModel
from artbook.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from artbook.domain.error import DomainError
from artbook.domain.service import JWTService
from artbook.interface.error import (
    InterfaceError,
    internal_error,
    optional_user,
    require_user,
    to_http_exception,
)

router = APIRouter(prefix="/artbooks", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(ApiModel):
    """API request for creating a comment.

    Length rules live in the domain so they are checked after sanitizing.
    """

    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(ApiModel):
    """API request for editing a comment."""

    content: str


@router.get("/{slug}/comments", response_model=GetCommentsResponse)
async def get_comments(
    slug: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = 1,
    limit: int | None = None,
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get one page of an artbook's comments with their direct replies.

    Top-level comments are newest first, replies oldest first. Out-of-range
    ``page`` and ``limit`` values are clamped. When authenticated, every
    comment says whether the viewer liked it.
    """
    try:
        request = GetCommentsRequest(
            slug=slug,
            page=page,
            limit=limit,
            viewer_id=optional_user(jwt_service, auth_token),
        )
        return await get_comments_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to fetch comments", e, slug=slug)


@router.post(
    "/{slug}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    slug: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Comment on an artbook or reply to a comment.

    Requires authentication.

    Raises:
        HTTPException: 401 without a session, 400 on invalid content, 404 if
            the artbook or parent is missing, 409 if the parent is on another
            artbook or already at maximum depth
    """
    try:
        user_id = require_user(jwt_service, auth_token, "comment")
        use_case_request = CreateCommentRequest(
            slug=slug,
            content=request.content,
            author_id=user_id,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to create comment", e, slug=slug)


@router.put("/{slug}/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    slug: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Edit a comment. Only the author can edit."""
    try:
        user_id = require_user(jwt_service, auth_token, "edit comments")
        use_case_request = UpdateCommentRequest(
            slug=slug,
            comment_id=comment_id,
            user_id=user_id,
            content=request.content,
        )
        return await update_comment_use_case.execute(use_case_request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error(
            "Failed to update comment", e, slug=slug, comment_id=comment_id
        )


@router.delete("/{slug}/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    slug: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment.

    Only the author can delete, and only while the comment has no replies.
    """
    try:
        user_id = require_user(jwt_service, auth_token, "delete comments")
        use_case_request = DeleteCommentRequest(
            slug=slug, comment_id=comment_id, user_id=user_id
        )
        return await delete_comment_use_case.execute(use_case_request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error(
            "Failed to delete comment", e, slug=slug, comment_id=comment_id
        )


@router.get(
    "/{slug}/comments/{comment_id}/replies", response_model=GetRepliesResponse
)
async def get_replies(
    slug: str,
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetRepliesResponse:
    """Get the direct replies of a comment, oldest first."""
    try:
        request = GetRepliesRequest(
            slug=slug,
            comment_id=comment_id,
            viewer_id=optional_user(jwt_service, auth_token),
        )
        return await get_replies_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error(
            "Failed to fetch replies", e, slug=slug, comment_id=comment_id
        )
