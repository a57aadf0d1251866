from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from ..enums.order_enums import OrderStatus
from ...menu.models.menu_models import MenuCategory


class OrderItemCreate(BaseModel):
    menu_item_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)


class OrderCreate(BaseModel):
    table_id: int = Field(..., gt=0)
    items: List[OrderItemCreate] = Field(..., min_length=1)
    staff_id: Optional[int] = Field(None, gt=0)


class OrderUpdate(BaseModel):
    """Partial order update; omitted fields keep their current value"""
    status: Optional[OrderStatus] = None
    staff_id: Optional[int] = Field(None, gt=0)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemOut(BaseModel):
    id: int
    order_id: int
    menu_item_id: int
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    item_name: Optional[str] = None
    category: Optional[MenuCategory] = None
    image: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: int
    table_id: int
    table_number: Optional[int] = None
    staff_id: Optional[int] = None
    staff_name: Optional[str] = None
    status: OrderStatus
    total_amount: Decimal
    created_at: datetime
    updated_at: datetime
    order_items: List[OrderItemOut] = []

    model_config = ConfigDict(from_attributes=True)


class OrderCancelResponse(BaseModel):
    message: str
    order_id: int
