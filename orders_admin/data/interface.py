from __future__ import annotations

from typing import List, Protocol

from .models import Order


class OrderSource(Protocol):
    """
    Contract for anything the orders view can read orders from.

    Implementations MUST NOT cache between calls: every call to
    ``fetch_orders`` goes to the underlying source, so each view activation
    sees fresh data. Any exception signals that the source failed.
    """

    name: str

    def fetch_orders(self) -> List[Order]:
        """Return every order held by the source, in source order."""
        ...
