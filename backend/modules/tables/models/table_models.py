# backend/modules/tables/models/table_models.py

from sqlalchemy import (
    Column,
    Integer,
    Enum as SQLEnum,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from enum import Enum

from core.database import Base
from core.mixins import TimestampMixin


class TableStatus(str, Enum):
    """Table status shown on the floor view"""

    FREE = "Free"
    OCCUPIED = "Occupied"
    SERVING = "Serving"
    BILLING = "Billing"


class Table(Base, TimestampMixin):
    """Restaurant table and its current state"""

    __tablename__ = "tables"

    id = Column(Integer, primary_key=True)
    number = Column(Integer, nullable=False, unique=True)

    # Status
    status = Column(
        SQLEnum(
            TableStatus,
            name="table_status",
            native_enum=False,
            create_constraint=True,
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
        default=TableStatus.FREE,
        index=True,
    )
    customer_count = Column(Integer)  # Display-only estimate

    # Relationships
    orders = relationship(
        "Order",
        back_populates="table",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("number > 0", name="chk_table_number_positive"),
        CheckConstraint(
            "customer_count IS NULL OR customer_count >= 0",
            name="chk_table_customer_count",
        ),
    )

    def __repr__(self):
        return f"<Table(number={self.number}, status={self.status})>"
