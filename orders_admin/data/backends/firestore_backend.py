from __future__ import annotations

from typing import Any, List, Optional

import firebase_admin
from firebase_admin import credentials, firestore

from ..interface import OrderSource
from ..models import Order
from ..records import to_orders
from ...config import get_config
from ...logger import get_logger

logger = get_logger(__name__)


def get_firestore_client(
    credentials_path: Optional[str] = None,
    project_id: Optional[str] = None,
):
    """Return a Firestore client, initializing the default Firebase app on first use.

    Uses the service account file at ``credentials_path`` when given, otherwise
    application default credentials.
    """
    try:
        app = firebase_admin.get_app()
    except ValueError:
        cred = credentials.Certificate(credentials_path) if credentials_path else None
        options = {"projectId": project_id} if project_id else None
        app = firebase_admin.initialize_app(cred, options)
        logger.info("Initialized Firebase app for Firestore access")
    return firestore.client(app)


class FirestoreOrderSource(OrderSource):
    """
    Reads orders straight from the Firestore ``orders`` collection.

    - The collection is read without filters.
    - An empty collection is a valid (empty) result, not a failure.
    - The client is created lazily so initialization errors count as a source failure.
    """

    name = "firestore"

    def __init__(
        self,
        collection: Optional[str] = None,
        client: Any = None,
        credentials_path: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> None:
        config = get_config()
        self.collection = collection or config.orders_collection
        self.credentials_path = credentials_path or config.firebase_credentials_path
        self.project_id = project_id or config.firebase_project_id
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_firestore_client(self.credentials_path, self.project_id)
        return self._client

    def fetch_orders(self) -> List[Order]:
        logger.info(f"Fetching orders from Firestore collection '{self.collection}'")
        snapshots = list(self.client.collection(self.collection).get())

        if not snapshots:
            logger.info("No orders found in Firestore")
            return []

        records = [{**(snapshot.to_dict() or {}), "id": snapshot.id} for snapshot in snapshots]
        orders = to_orders(records, self.name)

        logger.info(f"Found {len(orders)} orders from Firestore")
        return orders
