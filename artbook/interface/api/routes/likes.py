"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from artbook.application.usecase.like import (
    GetArtbookLikeStatusRequest,
    GetArtbookLikeStatusUseCase,
    GetCommentLikeStatusRequest,
    GetCommentLikeStatusUseCase,
    LikeStatusResponse,
    ToggleArtbookLikeRequest,
    ToggleArtbookLikeUseCase,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
    ToggleLikeResponse,
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

router = APIRouter(prefix="/artbooks", tags=["likes"], route_class=DishkaRoute)


@router.post("/{slug}/like", response_model=ToggleLikeResponse)
async def toggle_artbook_like(
    slug: str,
    toggle_like_use_case: FromDishka[ToggleArtbookLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like the artbook, or unlike it if already liked.

    Requires authentication.
    """
    try:
        user_id = require_user(jwt_service, auth_token, "like artbooks")
        request = ToggleArtbookLikeRequest(slug=slug, user_id=user_id)
        return await toggle_like_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to toggle like", e, slug=slug)


@router.get("/{slug}/like", response_model=LikeStatusResponse)
async def get_artbook_like_status(
    slug: str,
    like_status_use_case: FromDishka[GetArtbookLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeStatusResponse:
    """Get the artbook's like count and whether the viewer liked it."""
    try:
        request = GetArtbookLikeStatusRequest(
            slug=slug, viewer_id=optional_user(jwt_service, auth_token)
        )
        return await like_status_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to fetch like status", e, slug=slug)


@router.post("/{slug}/comments/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_comment_like(
    slug: str,
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like or unlike a comment on this artbook.

    Requires authentication. A comment from another artbook is a 409.
    """
    try:
        user_id = require_user(jwt_service, auth_token, "like comments")
        request = ToggleCommentLikeRequest(
            slug=slug, comment_id=comment_id, user_id=user_id
        )
        return await toggle_like_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error(
            "Failed to toggle comment like", e, slug=slug, comment_id=comment_id
        )


@router.get("/{slug}/comments/{comment_id}/like", response_model=LikeStatusResponse)
async def get_comment_like_status(
    slug: str,
    comment_id: str,
    like_status_use_case: FromDishka[GetCommentLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeStatusResponse:
    """Get a comment's like count and whether the viewer liked it."""
    try:
        request = GetCommentLikeStatusRequest(
            slug=slug,
            comment_id=comment_id,
            viewer_id=optional_user(jwt_service, auth_token),
        )
        return await like_status_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error(
            "Failed to fetch comment like status", e, slug=slug, comment_id=comment_id
        )
