from .data_filters import (
    OrderFilters,
    StatusTab,
    STATUS_TABS,
)

from .orders import (
    Order,
    OrderItem,
    ShippingAddress,
    OrderStatus,
    PaymentStatus,
    ORDER_STATUSES,
    PAYMENT_STATUSES,
)
from .order_summary import (
    OrderCounts,
    OrderSummary,
    ProductSales,
)

__all__ = [
    # Filter classes
    "OrderFilters",
    "StatusTab",
    "STATUS_TABS",
    # Order records
    "Order",
    "OrderItem",
    "ShippingAddress",
    "OrderStatus",
    "PaymentStatus",
    "ORDER_STATUSES",
    "PAYMENT_STATUSES",
    # Aggregates
    "OrderCounts",
    "OrderSummary",
    "ProductSales",
]
