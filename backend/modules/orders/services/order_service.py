import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional
from sqlalchemy.orm import Session, joinedload

from core.exceptions import NotFoundError, ValidationError
from ..enums.order_enums import OrderStatus, ACTIVE_ORDER_STATUSES
from ..models.order_models import Order, OrderItem
from ..schemas.order_schemas import OrderCreate, OrderUpdate
from ...menu.models.menu_models import MenuItem
from ...staff.models.staff_models import StaffMember
from ...tables.models.table_models import Table
from ...tables.services.table_state_service import table_state_service

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _to_money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _order_query(db: Session):
    return db.query(Order).options(
        joinedload(Order.order_items).joinedload(OrderItem.menu_item),
        joinedload(Order.table),
        joinedload(Order.staff),
    )


async def _get_table(db: Session, table_id: int) -> Table:
    table = db.query(Table).filter(Table.id == table_id).first()
    if not table:
        raise NotFoundError(f"Table with id {table_id} not found")
    return table


async def _get_staff(db: Session, staff_id: int) -> StaffMember:
    member = db.query(StaffMember).filter(StaffMember.id == staff_id).first()
    if not member:
        raise NotFoundError(f"Staff member with id {staff_id} not found")
    return member


async def get_order_by_id(db: Session, order_id: int) -> Order:
    order = _order_query(db).filter(Order.id == order_id).first()

    if not order:
        raise NotFoundError(f"Order with id {order_id} not found")

    return order


async def get_orders_service(
    db: Session,
    status: Optional[OrderStatus] = None,
    table_id: Optional[int] = None,
    limit: int = 100,
    offset: int = 0,
) -> List[Order]:
    query = _order_query(db)

    if status:
        query = query.filter(Order.status == status)
    if table_id:
        query = query.filter(Order.table_id == table_id)

    query = query.order_by(Order.created_at.desc(), Order.id.desc())
    return query.offset(offset).limit(limit).all()


async def get_active_orders_for_table(db: Session, table_id: int) -> List[Order]:
    await _get_table(db, table_id)

    return (
        _order_query(db)
        .filter(Order.table_id == table_id,
                Order.status.in_(ACTIVE_ORDER_STATUSES))
        .order_by(Order.created_at, Order.id)
        .all()
    )


async def create_order_service(db: Session, order_data: OrderCreate) -> Order:
    """
    Place a new order for a table.

    Every lookup and check runs before anything is added to the session,
    so a rejected order leaves no trace. Unit prices are copied from the
    menu at this moment; later menu price changes do not affect the order.
    The order, its lines and the table's new status share one commit.

    Raises:
        ValidationError: empty item list, non-positive quantity or an
            unavailable menu item
        NotFoundError: unknown table, staff member or menu item
    """
    if not order_data.items:
        raise ValidationError("Order must contain at least one item")
    for item in order_data.items:
        if item.quantity <= 0:
            raise ValidationError(
                f"Quantity for menu item {item.menu_item_id} must be positive"
            )

    table = await _get_table(db, order_data.table_id)
    if order_data.staff_id is not None:
        await _get_staff(db, order_data.staff_id)

    requested_ids = {item.menu_item_id for item in order_data.items}
    menu_items: Dict[int, MenuItem] = {
        menu_item.id: menu_item
        for menu_item in db.query(MenuItem).filter(MenuItem.id.in_(requested_ids))
    }

    lines: List[OrderItem] = []
    total = Decimal("0.00")
    for item in order_data.items:
        menu_item = menu_items.get(item.menu_item_id)
        if menu_item is None:
            raise NotFoundError(f"Menu item with id {item.menu_item_id} not found")
        if not menu_item.is_available:
            raise ValidationError(f"Menu item '{menu_item.name}' is not available")

        unit_price = _to_money(menu_item.price)
        subtotal = _to_money(unit_price * item.quantity)
        total += subtotal
        lines.append(
            OrderItem(
                menu_item_id=menu_item.id,
                quantity=item.quantity,
                unit_price=unit_price,
                subtotal=subtotal,
            )
        )

    order = Order(
        table_id=table.id,
        staff_id=order_data.staff_id,
        status=OrderStatus.PENDING,
        total_amount=_to_money(total),
        order_items=lines,
    )

    try:
        db.add(order)
        await table_state_service.resync_table(db, table)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        f"Created order {order.id} for table {table.number} "
        f"({len(lines)} lines, total {order.total_amount})"
    )
    return await get_order_by_id(db, order.id)


async def update_order_service(
    db: Session,
    order_id: int,
    order_update: OrderUpdate,
    settle_to_billing: bool = False,
) -> Order:
    """
    Apply a partial update to an order.

    Any status may follow any other. When the status changes the owning
    table is resynced in the same transaction; with ``settle_to_billing``
    an order moving to Paid leaves its table in Billing if it was the
    table's last active order and Occupied otherwise.
    """
    order = await get_order_by_id(db, order_id)

    if order_update.staff_id is not None:
        await _get_staff(db, order_update.staff_id)
        order.staff_id = order_update.staff_id

    previous_status = order.status
    status_changed = False
    if order_update.status is not None and order_update.status != order.status:
        order.status = order_update.status
        status_changed = True

    try:
        if status_changed:
            settled_order_id = None
            if settle_to_billing and order.status == OrderStatus.PAID:
                settled_order_id = order.id
            await table_state_service.resync_table(
                db, order.table, settled_order_id=settled_order_id
            )
        db.commit()
    except Exception:
        db.rollback()
        raise

    if status_changed:
        logger.info(
            f"Order {order.id} status {previous_status.value} -> "
            f"{order.status.value}"
        )

    db.expire_all()
    return await get_order_by_id(db, order_id)


async def cancel_order_service(db: Session, order_id: int) -> dict:
    """Delete a pending order and free its table if nothing else is active"""
    order = await get_order_by_id(db, order_id)

    if order.status != OrderStatus.PENDING:
        raise ValidationError("Only pending orders may be cancelled")

    table = order.table
    try:
        db.delete(order)
        await table_state_service.resync_table(db, table)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Cancelled order {order_id} on table {table.number}")
    return {"message": "Order cancelled successfully", "order_id": order_id}
