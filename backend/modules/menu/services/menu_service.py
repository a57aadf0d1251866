# backend/modules/menu/services/menu_service.py

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from core.exceptions import NotFoundError
from ..models.menu_models import MenuItem, MenuCategory
from ..schemas.menu_schemas import MenuItemCreate, MenuItemUpdate

logger = logging.getLogger(__name__)


class MenuService:
    """Service class for menu management operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_menu_items(
        self,
        category: Optional[MenuCategory] = None,
        available: Optional[bool] = None,
    ) -> List[MenuItem]:
        """Get menu items, optionally filtered by category and availability"""
        query = self.db.query(MenuItem)

        if category is not None:
            query = query.filter(MenuItem.category == category)

        if available is not None:
            query = query.filter(MenuItem.is_available == available)

        return query.order_by(MenuItem.category, MenuItem.name).all()

    def get_menu_item_by_id(self, item_id: int) -> MenuItem:
        item = self.db.query(MenuItem).filter(MenuItem.id == item_id).first()
        if not item:
            raise NotFoundError(f"Menu item with id {item_id} not found")
        return item

    def create_menu_item(self, item_data: MenuItemCreate) -> MenuItem:
        menu_item = MenuItem(**item_data.model_dump())
        self.db.add(menu_item)
        self.db.commit()
        self.db.refresh(menu_item)

        logger.info(f"Created menu item {menu_item.id} ({menu_item.name})")
        return menu_item

    def update_menu_item(self, item_id: int, item_data: MenuItemUpdate) -> MenuItem:
        """Update a menu item; price changes do not touch existing order lines"""
        menu_item = self.get_menu_item_by_id(item_id)

        update_data = item_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(menu_item, field, value)

        self.db.commit()
        self.db.refresh(menu_item)
        return menu_item

    def delete_menu_item(self, item_id: int) -> None:
        menu_item = self.get_menu_item_by_id(item_id)
        self.db.delete(menu_item)
        self.db.commit()

        logger.info(f"Deleted menu item {item_id}")
