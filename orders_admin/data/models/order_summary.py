from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field


class OrderCounts(BaseModel):
    """Number of orders per status, plus the overall total."""
    all: int = Field(default=0, description="All orders regardless of status")
    pending: int = Field(default=0, description="Orders awaiting processing")
    processing: int = Field(default=0, description="Orders being prepared")
    shipped: int = Field(default=0, description="Orders handed to the carrier")
    delivered: int = Field(default=0, description="Orders delivered to the customer")
    cancelled: int = Field(default=0, description="Cancelled orders")


class OrderSummary(BaseModel):
    """Headline numbers for the orders view."""
    counts: OrderCounts = Field(description="Per-status order counts")
    total_revenue: float = Field(description="SUM(total_amount) over paid orders")
    needing_attention: int = Field(description="Orders still pending or processing")
    completed: int = Field(description="Delivered orders")


class ProductSales(BaseModel):
    """Units sold for a single product across all orders."""
    product_id: Union[str, int] = Field(description="Product reference")
    name: str = Field(description="Product name as recorded on the first matching line")
    units: int = Field(description="SUM(quantity) over matching line items")
