"""Report use cases."""

from .common import ReportItem
from .create_report import (
    CreateReportRequest,
    CreateReportResponse,
    CreateReportUseCase,
)
from .get_report_status import (
    GetReportStatusRequest,
    GetReportStatusUseCase,
    ReportStatusResponse,
)

__all__ = [
    "CreateReportRequest",
    "CreateReportResponse",
    "CreateReportUseCase",
    "GetReportStatusRequest",
    "GetReportStatusUseCase",
    "ReportItem",
    "ReportStatusResponse",
]
