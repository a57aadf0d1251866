from sqlalchemy.orm import Session
from typing import List, Optional
from ..services.order_service import (
    create_order_service, update_order_service, cancel_order_service,
    get_order_by_id as get_order_service, get_orders_service
)
from ..schemas.order_schemas import (
    OrderCreate, OrderUpdate, OrderStatusUpdate, OrderOut, OrderCancelResponse
)
from ..enums.order_enums import OrderStatus


async def create_order(order_data: OrderCreate, db: Session) -> OrderOut:
    order = await create_order_service(db, order_data)
    return OrderOut.model_validate(order)


async def update_order(
    order_id: int, order_data: OrderUpdate, db: Session
) -> OrderOut:
    order = await update_order_service(
        db, order_id, order_data, settle_to_billing=True
    )
    return OrderOut.model_validate(order)


async def update_order_status(
    order_id: int, status_data: OrderStatusUpdate, db: Session
) -> OrderOut:
    order = await update_order_service(
        db, order_id, OrderUpdate(status=status_data.status),
        settle_to_billing=False
    )
    return OrderOut.model_validate(order)


async def cancel_order(order_id: int, db: Session) -> OrderCancelResponse:
    result = await cancel_order_service(db, order_id)
    return OrderCancelResponse(**result)


async def get_order_by_id(db: Session, order_id: int) -> OrderOut:
    order = await get_order_service(db, order_id)
    return OrderOut.model_validate(order)


async def list_orders(
    db: Session,
    status: Optional[OrderStatus] = None,
    table_id: Optional[int] = None,
    limit: int = 100,
    offset: int = 0,
) -> List[OrderOut]:
    orders = await get_orders_service(
        db, status=status, table_id=table_id, limit=limit, offset=offset
    )
    return [OrderOut.model_validate(order) for order in orders]
