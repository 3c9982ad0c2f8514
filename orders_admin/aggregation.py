"""Derived numbers for the orders view.

Everything here is a pure function of an in-memory order list, cheap enough to
recompute on every Streamlit rerun.
"""
from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from orders_admin.data.models import (
    ORDER_STATUSES,
    STATUS_TABS,
    Order,
    OrderCounts,
    OrderSummary,
    ProductSales,
)

ATTENTION_STATUSES = ("pending", "processing")

TABLE_COLUMNS = [
    "id", "order_date", "customer", "items", "total_amount",
    "status", "payment_status", "tracking_number", "shipping_address",
]

ITEM_COLUMNS = ["product_id", "name", "price", "quantity", "subtotal", "image"]


def order_counts(orders: Sequence[Order]) -> OrderCounts:
    counts = {status: 0 for status in ORDER_STATUSES}
    for order in orders:
        counts[order.status] += 1
    return OrderCounts(all=len(orders), **counts)


def total_revenue(orders: Sequence[Order]) -> float:
    """Sum of total_amount over orders whose payment has been received."""
    return sum((o.total_amount for o in orders if o.payment_status == "paid"), 0.0)


def orders_needing_attention(orders: Sequence[Order]) -> int:
    return sum(1 for o in orders if o.status in ATTENTION_STATUSES)


def filter_orders(orders: Sequence[Order], tab: str = "all") -> List[Order]:
    """Orders shown under a status tab, in their original order.

    Raises:
        ValueError: If ``tab`` is not 'all' or a known status.
    """
    if tab not in STATUS_TABS:
        raise ValueError(f"Unknown status tab: {tab}")
    if tab == "all":
        return list(orders)
    return [o for o in orders if o.status == tab]


def recent_orders(orders: Sequence[Order], limit: int = 5) -> List[Order]:
    """The ``limit`` most recently created orders, newest first."""
    return sorted(orders, key=lambda o: o.created_at, reverse=True)[:limit]


def top_products(orders: Sequence[Order], limit: int = 5) -> List[ProductSales]:
    """Best-selling products by units across every line item."""
    rows = [
        {"product_id": item.product_id, "name": item.name, "units": item.quantity or 1}
        for order in orders
        for item in order.items
    ]
    if not rows:
        return []

    sales = (
        pd.DataFrame(rows)
          .astype({"product_id": object})
          .groupby("product_id", as_index=False, sort=False)
          .agg(name=("name", "first"), units=("units", "sum"))
          .sort_values("units", ascending=False, kind="stable")
          .head(int(limit))
    )
    return [
        ProductSales(product_id=row.product_id, name=row.name, units=int(row.units))
        for row in sales.itertuples(index=False)
    ]


def summarize(orders: Sequence[Order]) -> OrderSummary:
    counts = order_counts(orders)
    return OrderSummary(
        counts=counts,
        total_revenue=total_revenue(orders),
        needing_attention=orders_needing_attention(orders),
        completed=counts.delivered,
    )


def orders_to_frame(orders: Sequence[Order]) -> pd.DataFrame:
    """Flatten orders into the rows of the orders table."""
    rows = []
    for o in orders:
        address = o.shipping_address
        rows.append(
            {
                "id": o.id,
                "order_date": o.order_date,
                "customer": address.full_name if address else "",
                "items": sum(item.quantity for item in o.items),
                "total_amount": o.total_amount,
                "status": o.status,
                "payment_status": o.payment_status,
                "tracking_number": o.tracking_number or "",
                "shipping_address": address.format() if address else "",
            }
        )
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def order_items_frame(order: Order) -> pd.DataFrame:
    """Line items of a single order, as shown in its detail panel."""
    rows = [
        {
            "product_id": str(item.product_id),
            "name": item.name,
            "price": item.price,
            "quantity": item.quantity,
            "subtotal": item.subtotal,
            "image": item.image or "",
        }
        for item in order.items
    ]
    return pd.DataFrame(rows, columns=ITEM_COLUMNS)


def order_details(order: Order) -> dict:
    """Customer, payment and fulfilment fields shown beside an order's line items."""
    address = order.shipping_address
    return {
        "customer": address.full_name if address else "",
        "phone": address.phone if address else "",
        "shipping_address": address.format() if address else "",
        "payment_method": order.payment_method or "",
        "payment_status": order.payment_status,
        "status": order.status,
        "order_date": order.order_date,
        "tracking_number": order.tracking_number or "",
        "notes": order.notes or "",
    }
