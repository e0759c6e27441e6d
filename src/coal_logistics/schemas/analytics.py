"""Dashboard analytics response schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from ..services.analytics import AnalyticsReport


class RevenueDataModel(BaseModel):
    month: str
    revenue: float
    cost: float
    profit: float


class ShipmentStatusCountModel(BaseModel):
    status: str
    count: int


class WeeklyShipmentCountModel(BaseModel):
    week: str
    count: int


class DashboardStatsModel(BaseModel):
    activeShipments: int
    totalVehicles: int
    totalTransporters: int
    revenueThisMonth: float
    shipmentTrend: float
    revenueTrend: float


class AnalyticsResponse(BaseModel):
    revenueData: List[RevenueDataModel]
    shipmentStatusData: List[ShipmentStatusCountModel]
    weeklyShipmentData: List[WeeklyShipmentCountModel]
    dashboardStats: DashboardStatsModel
    isSampleData: bool = False

    @classmethod
    def from_report(cls, report: AnalyticsReport) -> "AnalyticsResponse":
        stats = report.dashboard_stats
        return cls(
            revenueData=[
                RevenueDataModel(month=item.month, revenue=item.revenue, cost=item.cost, profit=item.profit)
                for item in report.revenue_data
            ],
            shipmentStatusData=[
                ShipmentStatusCountModel(status=item.status, count=item.count)
                for item in report.shipment_status_data
            ],
            weeklyShipmentData=[
                WeeklyShipmentCountModel(week=item.week, count=item.count)
                for item in report.weekly_shipment_data
            ],
            dashboardStats=DashboardStatsModel(
                activeShipments=stats.active_shipments,
                totalVehicles=stats.total_vehicles,
                totalTransporters=stats.total_transporters,
                revenueThisMonth=stats.revenue_this_month,
                shipmentTrend=stats.shipment_trend,
                revenueTrend=stats.revenue_trend,
            ),
            isSampleData=report.is_sample_data,
        )


class StatusBreakdownModel(BaseModel):
    name: str
    value: int


class ReportSummaryResponse(BaseModel):
    totalRevenue: float
    totalCost: float
    totalProfit: float
    totalShipments: int
    completedShipments: int
    inTransitShipments: int
    statusBreakdown: List[StatusBreakdownModel]
    isSampleData: bool
