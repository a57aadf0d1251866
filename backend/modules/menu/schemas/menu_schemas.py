from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal

from ..models.menu_models import MenuCategory


class MenuItemBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    category: MenuCategory
    image: str = Field(..., min_length=1, max_length=500)
    is_available: bool = True


class MenuItemCreate(MenuItemBase):
    pass


class MenuItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10,
                                     decimal_places=2)
    category: Optional[MenuCategory] = None
    image: Optional[str] = Field(None, min_length=1, max_length=500)
    is_available: Optional[bool] = None


class MenuItemOut(MenuItemBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
