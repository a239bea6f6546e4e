"""Artbook routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from artbook.application.usecase.artbook import (
    ArtbookResponse,
    CreateArtbookRequest,
    CreateArtbookUseCase,
    DeleteArtbookRequest,
    DeleteArtbookResponse,
    DeleteArtbookUseCase,
    GetArtbookRequest,
    GetArtbookUseCase,
    ListArtbooksRequest,
    ListArtbooksResponse,
    ListArtbooksUseCase,
    PageInput,
    RecordViewRequest,
    RecordViewResponse,
    RecordViewUseCase,
    UpdateArtbookRequest,
    UpdateArtbookUseCase,
)
from artbook.application.usecase.base import ApiModel
from artbook.domain.error import DomainError
from artbook.domain.service import JWTService
from artbook.interface.error import (
    InterfaceError,
    internal_error,
    optional_user,
    require_user,
    to_http_exception,
)

router = APIRouter(prefix="/artbooks", tags=["artbooks"], route_class=DishkaRoute)


class PageAPIInput(ApiModel):
    """A page in a create request."""

    page_number: int
    content: str
    picture_url: str | None = None
    audio_url: str | None = None


class CreateArtbookAPIRequest(ApiModel):
    """API request for creating an artbook."""

    title: str
    category: str
    pages: list[PageAPIInput]
    description: str | None = None
    cover_photo: str | None = None
    is_public: bool = True


class UpdateArtbookAPIRequest(ApiModel):
    """API request for updating an artbook. Omitted fields are unchanged."""

    title: str | None = None
    description: str | None = None
    cover_photo: str | None = None
    category: str | None = None
    is_public: bool | None = None


@router.post("", response_model=ArtbookResponse, status_code=status.HTTP_201_CREATED)
async def create_artbook(
    request: CreateArtbookAPIRequest,
    create_artbook_use_case: FromDishka[CreateArtbookUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ArtbookResponse:
    """Publish an artbook with its pages.

    Requires authentication.
    """
    try:
        user_id = require_user(jwt_service, auth_token, "create artbooks")
        use_case_request = CreateArtbookRequest(
            author_id=user_id,
            title=request.title,
            category=request.category,
            pages=[PageInput(**page.model_dump()) for page in request.pages],
            description=request.description,
            cover_photo=request.cover_photo,
            is_public=request.is_public,
        )
        return await create_artbook_use_case.execute(use_case_request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to create artbook", e)


@router.get("", response_model=ListArtbooksResponse)
async def list_artbooks(
    list_artbooks_use_case: FromDishka[ListArtbooksUseCase],
    jwt_service: FromDishka[JWTService],
    category: str | None = None,
    author_id: str | None = None,
    limit: int = 50,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
) -> ListArtbooksResponse:
    """List artbooks newest first, with likes, comments and views.

    Authors see their private artbooks when filtering by their own ID.
    """
    try:
        request = ListArtbooksRequest(
            category=category,
            author_id=author_id,
            viewer_id=optional_user(jwt_service, auth_token),
            limit=limit,
            offset=offset,
        )
        return await list_artbooks_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to list artbooks", e)


@router.get("/{slug}", response_model=ArtbookResponse)
async def get_artbook(
    slug: str,
    get_artbook_use_case: FromDishka[GetArtbookUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ArtbookResponse:
    """Get an artbook with pages and stats. Counts as a view."""
    try:
        request = GetArtbookRequest(
            slug=slug, viewer_id=optional_user(jwt_service, auth_token)
        )
        return await get_artbook_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to fetch artbook", e, slug=slug)


@router.put("/{slug}", response_model=ArtbookResponse)
async def update_artbook(
    slug: str,
    request: UpdateArtbookAPIRequest,
    update_artbook_use_case: FromDishka[UpdateArtbookUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ArtbookResponse:
    """Update an artbook's metadata. Only the author can update.

    A new title gives the artbook a new slug.
    """
    try:
        user_id = require_user(jwt_service, auth_token, "edit artbooks")
        use_case_request = UpdateArtbookRequest(
            slug=slug,
            user_id=user_id,
            changes=request.model_dump(exclude_unset=True),
        )
        return await update_artbook_use_case.execute(use_case_request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to update artbook", e, slug=slug)


@router.delete("/{slug}", response_model=DeleteArtbookResponse)
async def delete_artbook(
    slug: str,
    delete_artbook_use_case: FromDishka[DeleteArtbookUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteArtbookResponse:
    """Delete an artbook with its pages, comments, likes and reports."""
    try:
        user_id = require_user(jwt_service, auth_token, "delete artbooks")
        request = DeleteArtbookRequest(slug=slug, user_id=user_id)
        return await delete_artbook_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to delete artbook", e, slug=slug)


@router.post("/{slug}/view", response_model=RecordViewResponse)
async def record_view(
    slug: str,
    record_view_use_case: FromDishka[RecordViewUseCase],
) -> RecordViewResponse:
    """Count a view of the artbook."""
    try:
        return await record_view_use_case.execute(RecordViewRequest(slug=slug))
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to record view", e, slug=slug)
