"""Report routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from artbook.application.usecase.base import ApiModel
from artbook.application.usecase.report import (
    CreateReportRequest,
    CreateReportResponse,
    CreateReportUseCase,
    GetReportStatusRequest,
    GetReportStatusUseCase,
    ReportStatusResponse,
)
from artbook.domain.error import DomainError
from artbook.domain.service import JWTService
from artbook.interface.error import (
    InterfaceError,
    internal_error,
    require_user,
    to_http_exception,
)

router = APIRouter(prefix="/artbooks", tags=["reports"], route_class=DishkaRoute)


class CreateReportAPIRequest(ApiModel):
    """API request for reporting an artbook."""

    category: str
    description: str | None = None


@router.post(
    "/{slug}/report",
    response_model=CreateReportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_report(
    slug: str,
    request: CreateReportAPIRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReportResponse:
    """Report an artbook.

    Requires authentication. One report per user per artbook; authors
    cannot report their own artbooks.
    """
    try:
        user_id = require_user(jwt_service, auth_token, "report artbooks")
        use_case_request = CreateReportRequest(
            slug=slug,
            reporter_id=user_id,
            category=request.category,
            description=request.description,
        )
        return await create_report_use_case.execute(use_case_request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to submit report", e, slug=slug)


@router.get("/{slug}/report", response_model=ReportStatusResponse)
async def get_report_status(
    slug: str,
    report_status_use_case: FromDishka[GetReportStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportStatusResponse:
    """Check whether the current user already reported the artbook."""
    try:
        user_id = require_user(jwt_service, auth_token, "check reports")
        request = GetReportStatusRequest(slug=slug, user_id=user_id)
        return await report_status_use_case.execute(request)
    except (DomainError, InterfaceError) as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("Failed to fetch report status", e, slug=slug)
