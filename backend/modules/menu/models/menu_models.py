# backend/modules/menu/models/menu_models.py

from enum import Enum

from sqlalchemy import (
    Column,
    Integer,
    String,
    Boolean,
    Numeric,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship

from core.database import Base
from core.mixins import TimestampMixin


class MenuCategory(str, Enum):
    STARTERS = "Starters"
    MAINS = "Mains"
    DRINKS = "Drinks"


class MenuItem(Base, TimestampMixin):
    """Menu item model"""

    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(
        SQLEnum(
            MenuCategory,
            name="menu_category",
            native_enum=False,
            create_constraint=True,
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
        index=True,
    )
    image = Column(String(500), nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)

    # Removing a menu item removes the order lines that reference it
    order_items = relationship(
        "OrderItem",
        back_populates="menu_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("price > 0", name="chk_menu_item_price_positive"),
    )

    def __repr__(self):
        return f"<MenuItem(id={self.id}, name='{self.name}', price={self.price})>"
