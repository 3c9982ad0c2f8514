from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from orders_admin.aggregation import filter_orders, summarize
from orders_admin.data.errors import OrderSourcesExhausted
from orders_admin.data.fallback import fetch_orders
from orders_admin.data.interface import OrderSource
from orders_admin.data.models import Order, OrderFilters, OrderSummary
from orders_admin.logger import get_logger

Notifier = Callable[[str, str], None]

LOAD_FAILED_TITLE = "Error"
LOAD_FAILED_MESSAGE = "Failed to load orders from any source. Please try again."


class OrdersView:
    """State behind the admin orders page.

    Holds the order list, the loading flag and the selected status tab. The
    view is read-only: it fetches orders and derives numbers from them but never
    writes anything back.
    """

    def __init__(self, sources: Sequence[OrderSource], notify: Notifier) -> None:
        self.sources = list(sources)
        self.notify = notify
        self.logger = get_logger(__name__)
        self.orders: List[Order] = []
        self.loading = False
        self.filters = OrderFilters()
        self.source_name: Optional[str] = None

    def load(self) -> None:
        """Run one fetch sequence across the ranked sources.

        On exhaustion the order list is cleared and the notifier is called once;
        nothing is re-raised and nothing is retried.
        """
        self.loading = True
        try:
            result = fetch_orders(self.sources)
            self.orders = result.orders
            self.source_name = result.source_name
        except OrderSourcesExhausted as e:
            self.logger.error(str(e))
            self.orders = []
            self.source_name = None
            self.notify(LOAD_FAILED_TITLE, LOAD_FAILED_MESSAGE)
        finally:
            self.loading = False

    @property
    def active_tab(self) -> str:
        return self.filters.status

    def select_tab(self, tab: str) -> None:
        """Switch the status tab; unknown tabs raise pydantic.ValidationError (a ValueError)."""
        self.filters = OrderFilters(status=tab)

    @property
    def filtered_orders(self) -> List[Order]:
        return filter_orders(self.orders, self.active_tab)

    @property
    def summary(self) -> OrderSummary:
        return summarize(self.orders)
