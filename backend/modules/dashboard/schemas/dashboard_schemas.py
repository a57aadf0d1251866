# backend/modules/dashboard/schemas/dashboard_schemas.py

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from modules.orders.enums.order_enums import OrderStatus


class KpiCard(BaseModel):
    """A single headline figure on the manager dashboard"""

    value: str
    change: str
    is_positive: Optional[bool] = None
    total: Optional[int] = None


class DashboardKpis(BaseModel):
    todays_sales: KpiCard
    active_tables: KpiCard
    staff_on_duty: KpiCard
    total_orders: KpiCard


class SalesChartPoint(BaseModel):
    date: str  # short weekday label, e.g. "Mon"
    sales: Decimal


class RecentActivity(BaseModel):
    id: int
    status: OrderStatus
    total_amount: Decimal
    created_at: datetime
    table_number: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class DashboardResponse(BaseModel):
    kpis: DashboardKpis
    sales_chart: List[SalesChartPoint]
    recent_activity: List[RecentActivity]
