from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]
PaymentStatus = Literal["pending", "paid", "failed", "refunded"]

ORDER_STATUSES: tuple[str, ...] = ("pending", "processing", "shipped", "delivered", "cancelled")
PAYMENT_STATUSES: tuple[str, ...] = ("pending", "paid", "failed", "refunded")


class _CamelModel(BaseModel):
    # Wire records use camelCase keys; unknown keys (firebaseOrderId, ...) are dropped.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # Stored nulls fall back to the field default.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class OrderItem(_CamelModel):
    """A single line of an order."""
    product_id: Union[str, int] = Field(description="Product reference")
    name: str = Field(default="", description="Product name at time of order")
    price: float = Field(default=0.0, description="Unit price at time of order")
    quantity: int = Field(default=1, description="Quantity ordered")
    image: Optional[str] = Field(default=None, description="Product image URL")
    subtotal: Optional[float] = Field(default=None, description="Line total (price * quantity)")

    @model_validator(mode="after")
    def _default_subtotal(self) -> "OrderItem":
        if self.subtotal is None:
            self.subtotal = self.price * self.quantity
        return self


class ShippingAddress(_CamelModel):
    """Shipping address attached to an order."""
    full_name: str = Field(default="", description="Recipient name")
    address_line1: Optional[str] = Field(default=None, description="First address line")
    address: Optional[str] = Field(default=None, description="Legacy single-line address")
    address_line2: Optional[str] = Field(default=None, description="Second address line")
    city: str = Field(default="", description="City")
    state: str = Field(default="", description="State or province")
    postal_code: str = Field(default="", description="Postal code")
    country: str = Field(default="", description="Country")
    phone: str = Field(default="", description="Contact phone number")

    def format(self) -> str:
        """Join the non-empty address parts into a single line."""
        parts = [
            self.address_line1 or self.address,
            self.address_line2,
            self.city,
            self.state,
            self.postal_code,
            self.country,
        ]
        return ", ".join(p for p in parts if p)


class Order(_CamelModel):
    """An order as shown in the admin orders view."""
    id: str = Field(description="Unique order identifier")
    user_id: Optional[str] = Field(default=None, description="Customer who placed the order")
    items: List[OrderItem] = Field(default_factory=list, description="Ordered line items")
    status: OrderStatus = Field(default="pending", description="Fulfilment status")
    total_amount: float = Field(default=0.0, description="Order total")
    shipping_address: Optional[ShippingAddress] = Field(default=None, description="Shipping address")
    payment_method: Optional[str] = Field(default=None, description="Payment method used")
    payment_status: PaymentStatus = Field(default="pending", description="Payment status")
    payment_intent: Optional[str] = Field(default=None, description="Payment processor reference")
    order_date: datetime = Field(description="When the order was placed")
    tracking_number: Optional[str] = Field(default=None, description="Carrier tracking number")
    notes: Optional[str] = Field(default=None, description="Free-form order notes")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _stringify_ids(cls, value):
        # The REST API uses serial integers, Firestore uses document ids.
        if isinstance(value, int):
            return str(value)
        return value
