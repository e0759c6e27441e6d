"""Report summary endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ..errors import to_http_exception
from ...data.analytics_source import AnalyticsDataSource, get_analytics_source
from ...schemas.analytics import ReportSummaryResponse
from ...services.analytics import build_analytics, summarize_report

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary", response_model=ReportSummaryResponse, status_code=status.HTTP_200_OK)
def get_report_summary(source: AnalyticsDataSource = Depends(get_analytics_source)) -> ReportSummaryResponse:
    try:
        report = build_analytics(source)
    except Exception as exc:
        raise to_http_exception(exc, "loading reports data") from exc
    return ReportSummaryResponse.model_validate(summarize_report(report))
