from datetime import datetime, timedelta, timezone

import pytest
from google.api_core.datetime_helpers import DatetimeWithNanoseconds

from orders_admin.config import set_config_for_test
from orders_admin.data.backends.firestore_backend import FirestoreOrderSource


class MockSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return dict(self._data)


class MockCollection:
    def __init__(self, snapshots):
        self.snapshots = snapshots

    def get(self):
        return list(self.snapshots)


class MockFirestoreClient:
    def __init__(self, snapshots):
        self.snapshots = snapshots
        self.requested = []

    def collection(self, name):
        self.requested.append(name)
        return MockCollection(self.snapshots)


@pytest.fixture(autouse=True)
def firestore_config():
    set_config_for_test(orders_collection="orders")


def test_empty_collection_returns_no_orders():
    client = MockFirestoreClient([])
    assert FirestoreOrderSource(client=client).fetch_orders() == []
    assert client.requested == ["orders"]


def test_documents_are_mapped_with_ids_and_timestamps():
    ts = DatetimeWithNanoseconds(2024, 4, 5, 6, 7, 8, tzinfo=timezone.utc)
    client = MockFirestoreClient(
        [
            MockSnapshot("doc-1", {"status": "delivered", "paymentStatus": "paid", "totalAmount": 15.5,
                                   "orderDate": ts, "createdAt": ts, "updatedAt": ts}),
            MockSnapshot("doc-2", {"status": "pending", "orderDate": ts}),
        ]
    )
    orders = FirestoreOrderSource(client=client).fetch_orders()

    assert [o.id for o in orders] == ["doc-1", "doc-2"]
    assert orders[0].order_date == datetime(2024, 4, 5, 6, 7, 8, tzinfo=timezone.utc)
    assert orders[0].updated_at == datetime(2024, 4, 5, 6, 7, 8, tzinfo=timezone.utc)
    assert orders[1].updated_at is None


def test_unrecognized_timestamp_defaults_to_now():
    client = MockFirestoreClient([MockSnapshot("doc-1", {"orderDate": {"_seconds": "oops"}})])
    order = FirestoreOrderSource(client=client).fetch_orders()[0]
    now = datetime.now(timezone.utc)
    assert abs(now - order.order_date) < timedelta(minutes=1)
    assert abs(now - order.created_at) < timedelta(minutes=1)


def test_custom_collection_name():
    client = MockFirestoreClient([])
    FirestoreOrderSource(collection="archived_orders", client=client).fetch_orders()
    assert client.requested == ["archived_orders"]


def test_null_fields_fall_back_to_defaults():
    client = MockFirestoreClient(
        [
            MockSnapshot("doc-1", {"totalAmount": 10.0}),
            MockSnapshot("doc-2", {"totalAmount": 5.0}),
            MockSnapshot("doc-3", {"totalAmount": None, "items": None, "paymentStatus": None,
                                   "shippingAddress": {"fullName": None, "city": "Pune"}}),
        ]
    )
    orders = FirestoreOrderSource(client=client).fetch_orders()

    assert [o.id for o in orders] == ["doc-1", "doc-2", "doc-3"]
    assert orders[2].total_amount == 0.0
    assert orders[2].items == []
    assert orders[2].payment_status == "pending"
    assert orders[2].shipping_address.full_name == ""
    assert orders[2].shipping_address.city == "Pune"


def test_invalid_document_is_skipped_not_fatal():
    client = MockFirestoreClient(
        [
            MockSnapshot("doc-1", {"totalAmount": 10.0}),
            MockSnapshot("doc-2", {"items": [{"name": "Shirt", "price": 1, "quantity": 1}]}),
            MockSnapshot("doc-3", {"status": "returned"}),
            MockSnapshot("doc-4", {"totalAmount": 5.0}),
        ]
    )
    orders = FirestoreOrderSource(client=client).fetch_orders()
    assert [o.id for o in orders] == ["doc-1", "doc-4"]
