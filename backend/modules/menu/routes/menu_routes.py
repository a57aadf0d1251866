# backend/modules/menu/routes/menu_routes.py

from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from core.database import get_db
from ..models.menu_models import MenuCategory
from ..services.menu_service import MenuService
from ..schemas.menu_schemas import MenuItemCreate, MenuItemUpdate, MenuItemOut


router = APIRouter(prefix="/menu", tags=["Menu Management"])


def get_menu_service(db: Session = Depends(get_db)) -> MenuService:
    """Dependency to get menu service instance"""
    return MenuService(db)


@router.get("", response_model=List[MenuItemOut])
async def get_menu_items(
    category: Optional[MenuCategory] = Query(None, description="Filter by category"),
    available: Optional[bool] = Query(None, description="Filter by availability"),
    menu_service: MenuService = Depends(get_menu_service),
):
    """Get menu items ordered by category and name"""
    return menu_service.get_menu_items(category=category, available=available)


@router.post("", response_model=MenuItemOut, status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    item_data: MenuItemCreate,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Create a new menu item"""
    return menu_service.create_menu_item(item_data)


@router.get("/{item_id}", response_model=MenuItemOut)
async def get_menu_item(
    item_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.get_menu_item_by_id(item_id)


@router.put("/{item_id}", response_model=MenuItemOut)
async def update_menu_item(
    item_id: int,
    item_data: MenuItemUpdate,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Update a menu item"""
    return menu_service.update_menu_item(item_id, item_data)


@router.delete("/{item_id}")
async def delete_menu_item(
    item_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Delete a menu item"""
    menu_service.delete_menu_item(item_id)
    return {"message": "Menu item deleted successfully"}
