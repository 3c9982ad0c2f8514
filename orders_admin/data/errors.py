from __future__ import annotations

from typing import List, Tuple


class OrderSourceError(RuntimeError):
    """Raised by an order source when it cannot produce the order list."""


class OrderSourcesExhausted(RuntimeError):
    """Raised when every configured order source has failed."""

    def __init__(self, errors: List[Tuple[str, Exception]]) -> None:
        self.errors = errors
        if errors:
            detail = "; ".join(f"{name}: {err}" for name, err in errors)
        else:
            detail = "no order sources configured"
        super().__init__(f"Failed to load orders from any source ({detail})")
