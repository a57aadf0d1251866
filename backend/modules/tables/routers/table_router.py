# backend/modules/tables/routers/table_router.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from ..schemas.table_schemas import (
    TableCreate, TableUpdate, TableResponse, TableSyncResult
)
from ..services.layout_service import layout_service
from ..services.table_state_service import table_state_service
from ...orders.schemas.order_schemas import OrderOut
from ...orders.services.order_service import get_active_orders_for_table

router = APIRouter(prefix="/tables", tags=["Tables"])


@router.get("", response_model=List[TableResponse])
async def get_tables(db: Session = Depends(get_db)):
    """Get all tables ordered by number"""
    return await layout_service.get_tables(db)


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
async def create_table(table_data: TableCreate, db: Session = Depends(get_db)):
    """
    Create a new table

    Fails with 409 if the table number is already taken.
    """
    return await layout_service.create_table(db, table_data)


@router.post("/sync-status", response_model=TableSyncResult)
async def sync_table_statuses(db: Session = Depends(get_db)):
    """
    Recompute every table's status from its active orders
    """
    updated = await table_state_service.sync_all_table_statuses(db)
    return TableSyncResult(
        message="Table statuses synchronized", tables_updated=updated
    )


@router.get("/{table_id}", response_model=TableResponse)
async def get_table(table_id: int, db: Session = Depends(get_db)):
    return await layout_service.get_table(db, table_id)


@router.put("/{table_id}", response_model=TableResponse)
async def update_table(
    table_id: int,
    update_data: TableUpdate,
    db: Session = Depends(get_db)
):
    """
    Manually override a table's number, status or customer count
    """
    return await layout_service.update_table(db, table_id, update_data)


@router.delete("/{table_id}")
async def delete_table(table_id: int, db: Session = Depends(get_db)):
    """Delete a table and all of its orders"""
    await layout_service.delete_table(db, table_id)
    return {"message": "Table deleted successfully"}


@router.get("/{table_id}/orders", response_model=List[OrderOut])
async def get_table_orders(table_id: int, db: Session = Depends(get_db)):
    """Get the table's active (unpaid) orders"""
    return await get_active_orders_for_table(db, table_id)
