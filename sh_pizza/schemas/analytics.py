"""Analytics & Dashboard Schemas — read-only rollups for the admin console and customers."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sh_pizza.schemas.auth import SessionUser
from sh_pizza.schemas.common import CamelModel
from sh_pizza.schemas.offer import OfferResponse


class MonthRevenue(CamelModel):
    month: str
    revenue: float


class BranchPerformance(CamelModel):
    name: str
    orders: int
    revenue: float


class RecentOrder(CamelModel):
    id: UUID
    total_amount: Decimal
    status: str
    created_at: datetime
    customer_email: str


class AnalyticsReport(CamelModel):
    total_orders: int
    total_revenue: float
    average_order_value: float
    orders_by_status: dict[str, int]
    revenue_by_month: list[MonthRevenue]
    top_branches: list[BranchPerformance]
    recent_orders: list[RecentOrder]


class OrderSummary(CamelModel):
    id: UUID
    branch_id: UUID
    status: str
    total_amount: Decimal
    created_at: datetime


class AdminStats(CamelModel):
    total_users: int
    total_branches: int
    total_pizzas: int
    total_orders: int
    active_offers: int
    recent_orders: list[OrderSummary]


class CustomerDashboard(CamelModel):
    user: SessionUser
    dashboard_path: str
    recent_orders: list[OrderSummary]
    unread_notifications: int
    live_offers: list[OfferResponse]
