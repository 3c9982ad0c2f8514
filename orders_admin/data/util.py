from __future__ import annotations

from typing import List, Literal, Optional, Sequence

from .backends.api_backend import ApiOrderSource
from .backends.firestore_backend import FirestoreOrderSource
from .interface import OrderSource
from ..config import get_config


def get_order_source(kind: Literal["api", "firestore"]) -> OrderSource:
    if kind == "api":
        return ApiOrderSource()
    if kind == "firestore":
        return FirestoreOrderSource()
    raise ValueError(f"Unknown order source kind: {kind}")


def get_order_sources(kinds: Optional[Sequence[str]] = None) -> List[OrderSource]:
    """Build the ranked list of order sources (defaults to ``config.order_sources``)."""
    if kinds is None:
        kinds = get_config().order_sources
    return [get_order_source(kind) for kind in kinds]
