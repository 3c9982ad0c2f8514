from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StatusTab = Literal["all", "pending", "processing", "shipped", "delivered", "cancelled"]

STATUS_TABS: tuple[str, ...] = ("all", "pending", "processing", "shipped", "delivered", "cancelled")


class OrderFilters(BaseModel):
    """Filters for the orders view."""
    status: StatusTab = Field(default="all", description="Selected status tab ('all' keeps every order)")
