from __future__ import annotations

from typing import Dict, List, Optional
from urllib.parse import urljoin

import requests

from ..errors import OrderSourceError
from ..interface import OrderSource
from ..models import Order
from ..records import to_orders
from ...config import get_config
from ...logger import get_logger

logger = get_logger(__name__)


class ApiOrderSource(OrderSource):
    """
    Reads orders from the storefront REST API (``GET /api/admin/orders``).

    - Any non-2xx response is a failure; the body is not inspected.
    - Transport errors from ``requests`` propagate unchanged.
    - Every call issues a fresh request.
    """

    name = "api"

    def __init__(
        self,
        base_url: Optional[str] = None,
        orders_path: Optional[str] = None,
        user_id: Optional[str] = None,
        firebase_uid: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = get_config()
        self.base_url = base_url or config.api_base_url
        self.orders_path = orders_path or config.admin_orders_path
        self.user_id = user_id or config.api_user_id
        self.firebase_uid = firebase_uid or config.api_firebase_uid
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return urljoin(self.base_url.rstrip("/") + "/", self.orders_path.lstrip("/"))

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.user_id:
            headers["X-User-ID"] = str(self.user_id)
        if self.firebase_uid:
            headers["Firebase-UID"] = self.firebase_uid
        return headers

    def fetch_orders(self) -> List[Order]:
        logger.info(f"Fetching orders from API endpoint {self.url}")
        response = self.session.get(self.url, headers=self._headers(), timeout=self.timeout)

        if not response.ok:
            raise OrderSourceError(f"API returned status {response.status_code}")

        records = response.json()
        if not isinstance(records, list):
            raise OrderSourceError(
                f"API returned {type(records).__name__} instead of a list of orders"
            )

        orders = to_orders(records, self.name)
        logger.info(f"Found {len(orders)} orders from API")
        return orders
