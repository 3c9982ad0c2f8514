import pytest
import requests

from orders_admin.config import set_config_for_test
from orders_admin.data.backends.api_backend import ApiOrderSource
from orders_admin.data.errors import OrderSourceError


class MockResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload

    def json(self):
        return self._payload


class MockSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def api_config():
    set_config_for_test(
        api_base_url="http://shop.test/",
        admin_orders_path="/api/admin/orders",
        api_user_id="7",
        api_firebase_uid="fb-uid",
        request_timeout=None,
    )


def test_request_targets_admin_orders_with_user_headers():
    session = MockSession(MockResponse(200, []))
    ApiOrderSource(session=session).fetch_orders()

    call = session.calls[0]
    assert call["url"] == "http://shop.test/api/admin/orders"
    assert call["headers"]["X-User-ID"] == "7"
    assert call["headers"]["Firebase-UID"] == "fb-uid"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] is None


def test_records_are_parsed_into_orders():
    payload = [
        {
            "id": 12,
            "userId": 3,
            "items": [{"productId": 5, "name": "Linen Shirt", "price": 20.0, "quantity": 2}],
            "status": "shipped",
            "totalAmount": 40.0,
            "shippingAddress": {"fullName": "Asha Rao", "city": "Pune", "country": "IN"},
            "paymentStatus": "paid",
            "orderDate": "2024-02-01T10:00:00Z",
            "createdAt": "2024-02-01T10:00:00Z",
            "firebaseOrderId": "abc",
        }
    ]
    orders = ApiOrderSource(session=MockSession(MockResponse(200, payload))).fetch_orders()

    assert len(orders) == 1
    order = orders[0]
    assert order.id == "12"
    assert order.user_id == "3"
    assert order.items[0].subtotal == 40.0
    assert order.shipping_address.full_name == "Asha Rao"
    assert order.order_date.year == 2024
    assert order.updated_at is None


def test_empty_list_is_a_success():
    assert ApiOrderSource(session=MockSession(MockResponse(200, []))).fetch_orders() == []


def test_non_success_status_raises():
    source = ApiOrderSource(session=MockSession(MockResponse(500, {"message": "Server error"})))
    with pytest.raises(OrderSourceError, match="500"):
        source.fetch_orders()


def test_non_list_body_raises():
    source = ApiOrderSource(session=MockSession(MockResponse(200, {"orders": []})))
    with pytest.raises(OrderSourceError):
        source.fetch_orders()


def test_transport_error_propagates():
    source = ApiOrderSource(session=MockSession(error=requests.ConnectionError("refused")))
    with pytest.raises(requests.ConnectionError):
        source.fetch_orders()


def test_bad_records_are_skipped_and_nulls_defaulted():
    payload = [
        {"id": 1, "totalAmount": 12.5, "paymentStatus": "paid"},
        {"id": 2, "totalAmount": None, "trackingNumber": None},
        {"id": 3, "items": [{"name": "No product id"}]},
        "not an order",
    ]
    orders = ApiOrderSource(session=MockSession(MockResponse(200, payload))).fetch_orders()

    assert [o.id for o in orders] == ["1", "2"]
    assert orders[1].total_amount == 0.0
    assert orders[1].tracking_number is None
