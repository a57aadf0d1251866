# backend/modules/tables/services/table_state_service.py

from typing import Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import func
import logging

from core.query_logger import log_query_performance
from ..models.table_models import Table, TableStatus
from ...orders.enums.order_enums import (
    OrderStatus, ACTIVE_ORDER_STATUSES, IN_KITCHEN_STATUSES
)
from ...orders.models.order_models import Order, OrderItem

logger = logging.getLogger(__name__)


def derive_table_status(
    order_statuses: Iterable[OrderStatus],
    guest_count: Optional[int] = None,
    settled: bool = False,
) -> Tuple[TableStatus, Optional[int]]:
    """
    Work out a table's status from the statuses of its orders.

    Paid orders are ignored. Pending/Preparing outranks Ready/Served, so a
    table with one Pending and one Ready order is Occupied.

    Args:
        order_statuses: statuses of the table's orders (Paid entries are skipped)
        guest_count: display-only customer estimate kept for non-Free results
        settled: an order on this table was just paid; with nothing else
            active the table moves to Billing, otherwise it is Occupied

    Returns:
        (status, customer_count); customer_count is None whenever the
        table is Free
    """
    active = {OrderStatus(s) for s in order_statuses} - {OrderStatus.PAID}

    if settled:
        # Paid through a direct order update
        if active:
            return TableStatus.OCCUPIED, guest_count
        return TableStatus.BILLING, guest_count

    if not active:
        return TableStatus.FREE, None

    if active & set(IN_KITCHEN_STATUSES):
        return TableStatus.OCCUPIED, guest_count

    return TableStatus.SERVING, guest_count


class TableStateService:
    """Keeps table status consistent with the table's active orders"""

    def _active_order_statuses(self, db: Session, table_id: int) -> List[OrderStatus]:
        rows = (
            db.query(Order.status)
            .filter(Order.table_id == table_id,
                    Order.status.in_(ACTIVE_ORDER_STATUSES))
            .group_by(Order.status)
            .all()
        )
        return [row[0] for row in rows]

    def _active_guest_estimate(
        self, db: Session, table_id: int, include_order_id: Optional[int] = None
    ) -> Optional[int]:
        """Sum of line quantities across the table's active orders"""
        condition = Order.status.in_(ACTIVE_ORDER_STATUSES)
        if include_order_id is not None:
            condition = condition | (Order.id == include_order_id)

        total = (
            db.query(func.sum(OrderItem.quantity))
            .join(Order, Order.id == OrderItem.order_id)
            .filter(Order.table_id == table_id, condition)
            .scalar()
        )
        return int(total) if total else None

    async def resync_table(
        self,
        db: Session,
        table: Table,
        settled_order_id: Optional[int] = None,
    ) -> Table:
        """
        Recompute and write one table's status and customer count.

        Does not commit; callers run this inside their own transaction.

        Args:
            db: open session
            table: table to update
            settled_order_id: id of an order that was just marked Paid. When
                given and no other order is active, the table goes to Billing
                and keeps that order's guests in the estimate.
        """
        db.flush()

        statuses = self._active_order_statuses(db, table.id)
        settled = settled_order_id is not None
        # The paid order only counts towards guests while the bill is open
        guest_count = self._active_guest_estimate(
            db, table.id,
            include_order_id=None if statuses else settled_order_id
        )
        new_status, customer_count = derive_table_status(
            statuses, guest_count, settled=settled
        )

        if table.status != new_status:
            logger.info(
                f"Table {table.number} status {table.status.value if table.status else None}"
                f" -> {new_status.value}"
            )

        table.status = new_status
        table.customer_count = customer_count
        return table

    async def sync_all_table_statuses(self, db: Session) -> int:
        """
        Resync every table from its active orders in one transaction.

        The bulk path never produces Billing.

        Returns:
            Number of tables updated
        """
        with log_query_performance(db.get_bind(), "sync_all_table_statuses"):
            try:
                tables = db.query(Table).order_by(Table.number).all()
                for table in tables:
                    await self.resync_table(db, table)
                db.commit()
            except Exception:
                db.rollback()
                raise

        logger.info(f"Synced status of {len(tables)} tables")
        return len(tables)


table_state_service = TableStateService()
