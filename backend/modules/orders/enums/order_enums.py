from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PREPARING = "Preparing"
    READY = "Ready"
    SERVED = "Served"
    PAID = "Paid"  # Settled; no longer active


# Orders that still hold a table
ACTIVE_ORDER_STATUSES = (
    OrderStatus.PENDING,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.SERVED,
)

# Orders the kitchen has not finished yet
IN_KITCHEN_STATUSES = (OrderStatus.PENDING, OrderStatus.PREPARING)
