from sqlalchemy import (Column, Integer, ForeignKey, Numeric, Enum,
                        CheckConstraint)
from sqlalchemy.orm import relationship
from core.database import Base
from core.mixins import CreatedAtMixin, TimestampMixin
from ..enums.order_enums import OrderStatus


class Order(Base, TimestampMixin):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    table_id = Column(Integer, ForeignKey("tables.id", ondelete="CASCADE"),
                      nullable=False, index=True)
    staff_id = Column(Integer, ForeignKey("staff.id", ondelete="SET NULL"),
                      nullable=True, index=True)
    status = Column(
        Enum(OrderStatus, name="order_status", native_enum=False,
             create_constraint=True,
             values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
        default=OrderStatus.PENDING,
        index=True
    )
    # Sum of line subtotals at creation; never recomputed
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)

    table = relationship("Table", back_populates="orders")
    staff = relationship("StaffMember", back_populates="orders")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderItem.id",
    )

    @property
    def table_number(self):
        return self.table.number if self.table else None

    @property
    def staff_name(self):
        return self.staff.name if self.staff else None


class OrderItem(Base, CreatedAtMixin):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"),
                      nullable=False, index=True)
    menu_item_id = Column(Integer,
                          ForeignKey("menu_items.id", ondelete="CASCADE"),
                          nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    # Price snapshot taken when the order was placed
    unit_price = Column(Numeric(10, 2), nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)

    order = relationship("Order", back_populates="order_items")
    menu_item = relationship("MenuItem", back_populates="order_items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="chk_order_item_quantity"),
    )

    @property
    def item_name(self):
        return self.menu_item.name if self.menu_item else None

    @property
    def category(self):
        return self.menu_item.category if self.menu_item else None

    @property
    def image(self):
        return self.menu_item.image if self.menu_item else None
