from __future__ import annotations

from typing import Iterable, List

from pydantic import ValidationError

from .dates import normalize_order_dates
from .models import Order
from ..logger import get_logger

logger = get_logger(__name__)


def to_orders(records: Iterable[object], source_name: str) -> List[Order]:
    """Map raw order records into ``Order`` models, one record at a time.

    A record that is not a mapping, or that still fails validation after its
    null fields fall back to their defaults, is logged and skipped. The rest
    of the batch is kept.
    """
    orders: List[Order] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping {source_name} record #{index}: expected an object, got {type(record).__name__}")
            continue
        try:
            orders.append(Order.model_validate(normalize_order_dates(record)))
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            logger.warning(f"Skipping {source_name} order {record.get('id', index)!r}: invalid {fields}")
    return orders
