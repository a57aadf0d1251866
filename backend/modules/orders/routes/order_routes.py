from fastapi import APIRouter, Depends, Query, status as http_status
from sqlalchemy.orm import Session
from typing import List, Optional
from core.database import get_db
from ..controllers.order_controller import (
    create_order, update_order, update_order_status, cancel_order,
    get_order_by_id, list_orders
)
from ..enums.order_enums import OrderStatus
from ..schemas.order_schemas import (
    OrderCreate, OrderUpdate, OrderStatusUpdate, OrderOut, OrderCancelResponse
)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("", response_model=List[OrderOut])
async def get_orders(
    status: Optional[OrderStatus] = Query(
        None, description="Filter by order status"
    ),
    table_id: Optional[int] = Query(
        None, description="Filter by table ID"
    ),
    limit: int = Query(
        100, ge=1, le=1000, description="Number of orders to return"
    ),
    offset: int = Query(0, ge=0, description="Number of orders to skip"),
    db: Session = Depends(get_db)
):
    """
    Retrieve orders, newest first.

    - **status**: Filter by order status (Pending, Preparing, Ready, Served, Paid)
    - **table_id**: Filter by table ID
    - **limit**: Maximum number of orders to return (1-1000)
    - **offset**: Number of orders to skip for pagination
    """
    return await list_orders(
        db, status=status, table_id=table_id, limit=limit, offset=offset
    )


@router.post("", response_model=OrderOut,
             status_code=http_status.HTTP_201_CREATED)
async def place_order(order_data: OrderCreate, db: Session = Depends(get_db)):
    """
    Place an order for a table. Prices are taken from the current menu and
    the table is marked Occupied.
    """
    return await create_order(order_data, db)


@router.get("/{id}", response_model=OrderOut)
async def get_order(id: int, db: Session = Depends(get_db)):
    return await get_order_by_id(db, id)


@router.put("/{id}", response_model=OrderOut)
async def update_existing_order(
    id: int, order_data: OrderUpdate, db: Session = Depends(get_db)
):
    """
    Update an order's status and/or assigned staff member.

    Paying the last active order on a table leaves the table in Billing.
    """
    return await update_order(id, order_data, db)


@router.patch("/{id}/status", response_model=OrderOut)
async def change_order_status(
    id: int, status_data: OrderStatusUpdate, db: Session = Depends(get_db)
):
    """
    Change an order's status and resync its table from the active orders.
    """
    return await update_order_status(id, status_data, db)


@router.delete("/{id}", response_model=OrderCancelResponse)
async def delete_order(id: int, db: Session = Depends(get_db)):
    """Cancel a pending order"""
    return await cancel_order(id, db)
