"""Dashboard analytics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ..errors import to_http_exception
from ...data.analytics_source import AnalyticsDataSource, get_analytics_source
from ...schemas.analytics import AnalyticsResponse
from ...services.analytics import build_analytics

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/dashboard", response_model=AnalyticsResponse, status_code=status.HTTP_200_OK)
def get_dashboard_analytics(source: AnalyticsDataSource = Depends(get_analytics_source)) -> AnalyticsResponse:
    try:
        report = build_analytics(source)
    except Exception as exc:
        raise to_http_exception(exc, "loading dashboard data") from exc
    return AnalyticsResponse.from_report(report)
