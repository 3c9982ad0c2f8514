from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import OrderSourcesExhausted
from .interface import OrderSource
from .models import Order
from ..logger import get_logger

logger = get_logger(__name__)


@dataclass
class FetchResult:
    orders: List[Order]
    source_name: str  # the source whose data was used


def fetch_orders(sources: Sequence[OrderSource]) -> FetchResult:
    """Try each source in priority order and return the first successful result.

    A source succeeds when it returns without raising, even if it returns no
    orders; later sources are then never called. Failures are logged and the
    next source is tried. Results from different sources are never merged.

    Raises:
        OrderSourcesExhausted: If every source failed (or none were given).
    """
    errors: List[Tuple[str, Exception]] = []
    for source in sources:
        try:
            orders = source.fetch_orders()
        except Exception as e:
            logger.warning(f"Order source '{source.name}' failed: {e}")
            errors.append((source.name, e))
            continue
        if errors:
            logger.info(f"Loaded {len(orders)} orders from fallback source '{source.name}'")
        return FetchResult(orders=orders, source_name=source.name)

    raise OrderSourcesExhausted(errors)
