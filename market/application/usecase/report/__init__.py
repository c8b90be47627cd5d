"""Report use cases."""

from .submit_report import (
    SubmitReportRequest,
    SubmitReportResponse,
    SubmitReportUseCase,
)

__all__ = [
    "SubmitReportRequest",
    "SubmitReportResponse",
    "SubmitReportUseCase",
]
