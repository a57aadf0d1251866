# backend/modules/dashboard/services/dashboard_service.py

"""
Service for the manager dashboard.

Aggregates sales, table occupancy, staff and order figures straight from
the operational tables. Days are calendar days in UTC.
"""

from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func
from typing import List, Optional, Tuple
from datetime import datetime, timedelta, timezone
from decimal import Decimal
import logging

from core.query_logger import log_query_performance
from modules.orders.enums.order_enums import OrderStatus
from modules.orders.models.order_models import Order
from modules.staff.enums.staff_enums import StaffStatus
from modules.staff.models.staff_models import StaffMember
from modules.tables.models.table_models import Table, TableStatus
from ..schemas.dashboard_schemas import (
    DashboardResponse,
    DashboardKpis,
    KpiCard,
    SalesChartPoint,
    RecentActivity,
)

logger = logging.getLogger(__name__)

CHART_DAYS = 7
RECENT_ACTIVITY_LIMIT = 10


def percent_change(current, previous) -> float:
    """Change from ``previous`` to ``current`` in percent; +100 when there was nothing before"""
    if not previous:
        return 100.0
    return float((Decimal(current) - Decimal(previous)) / Decimal(previous) * 100)


def format_change(change: float) -> str:
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.0f}%"


class DashboardService:
    """Service for manager dashboard KPIs"""

    def __init__(self, db: Session):
        self.db = db

    def _day_bounds(self, day_start: datetime) -> Tuple[datetime, datetime]:
        return day_start, day_start + timedelta(days=1)

    def _paid_sales(self, start: datetime, end: datetime) -> Decimal:
        total = (
            self.db.query(func.coalesce(func.sum(Order.total_amount), 0))
            .filter(
                Order.created_at >= start,
                Order.created_at < end,
                Order.status == OrderStatus.PAID,
            )
            .scalar()
        )
        return Decimal(total or 0).quantize(Decimal("0.01"))

    def _order_count(self, start: datetime, end: datetime) -> int:
        return (
            self.db.query(func.count(Order.id))
            .filter(Order.created_at >= start, Order.created_at < end)
            .scalar()
        )

    def _sales_chart(self, today_start: datetime) -> List[SalesChartPoint]:
        points = []
        for days_ago in range(CHART_DAYS - 1, -1, -1):
            start, end = self._day_bounds(today_start - timedelta(days=days_ago))
            points.append(
                SalesChartPoint(
                    date=start.strftime("%a"), sales=self._paid_sales(start, end)
                )
            )
        return points

    def _recent_activity(self) -> List[RecentActivity]:
        orders = (
            self.db.query(Order)
            .options(joinedload(Order.table))
            .order_by(Order.created_at.desc(), Order.id.desc())
            .limit(RECENT_ACTIVITY_LIMIT)
            .all()
        )
        return [RecentActivity.model_validate(order) for order in orders]

    async def get_dashboard_data(
        self, now: Optional[datetime] = None
    ) -> DashboardResponse:
        """Build the dashboard as of ``now`` (naive UTC, defaults to the current time)"""
        if now is None:
            now = datetime.now(timezone.utc).replace(tzinfo=None)

        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        yesterday_start = today_start - timedelta(days=1)

        with log_query_performance(self.db.get_bind(), "dashboard.get_dashboard_data"):
            todays_sales = self._paid_sales(*self._day_bounds(today_start))
            yesterdays_sales = self._paid_sales(*self._day_bounds(yesterday_start))
            sales_change = percent_change(todays_sales, yesterdays_sales)

            active_tables = (
                self.db.query(func.count(Table.id))
                .filter(Table.status != TableStatus.FREE)
                .scalar()
            )
            total_tables = self.db.query(func.count(Table.id)).scalar()

            staff_on_duty = (
                self.db.query(func.count(StaffMember.id))
                .filter(StaffMember.status == StaffStatus.ON_SHIFT)
                .scalar()
            )
            total_staff = self.db.query(func.count(StaffMember.id)).scalar()

            todays_orders = self._order_count(*self._day_bounds(today_start))
            yesterdays_orders = self._order_count(*self._day_bounds(yesterday_start))
            orders_change = percent_change(todays_orders, yesterdays_orders)

            kpis = DashboardKpis(
                todays_sales=KpiCard(
                    value=f"${todays_sales:.2f}",
                    change=format_change(sales_change),
                    is_positive=sales_change >= 0,
                ),
                active_tables=KpiCard(
                    value=str(active_tables),
                    total=total_tables,
                    change=f"{active_tables}/{total_tables}",
                ),
                staff_on_duty=KpiCard(
                    value=str(staff_on_duty),
                    total=total_staff,
                    change=f"{staff_on_duty}/{total_staff}",
                ),
                total_orders=KpiCard(
                    value=str(todays_orders),
                    change=format_change(orders_change),
                    is_positive=orders_change >= 0,
                ),
            )

            return DashboardResponse(
                kpis=kpis,
                sales_chart=self._sales_chart(today_start),
                recent_activity=self._recent_activity(),
            )
