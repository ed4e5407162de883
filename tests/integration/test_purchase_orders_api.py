"""Integration tests for the purchase order, queue and logistics endpoints."""

from decimal import Decimal

from fastapi.testclient import TestClient


ORDER = {
    "order_id": 1007,
    "quantity": 100,
    "unit_price": "50",
    "seller_bank_account": "ACC-1",
    "origin": "thoh",
    "raw_material": "sand",
}


def test_health(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["queue_driver_running"] is False


def test_create_purchase_order_enqueues_it(test_client: TestClient):
    response = test_client.post("/purchase-orders", json=ORDER)

    assert response.status_code == 201, response.text
    body = response.json()
    assert body["status"] == "requires_payment_supplier"
    assert Decimal(body["unit_price"]) == Decimal("50")

    queue_status = test_client.get("/queue").json()
    assert queue_status["queue_count"] == 1


def test_create_purchase_order_requires_one_classification(test_client: TestClient):
    response = test_client.post("/purchase-orders", json={**ORDER, "is_equipment_order": True})

    assert response.status_code == 422


def test_get_purchase_order(test_client: TestClient):
    created = test_client.post("/purchase-orders", json=ORDER).json()

    response = test_client.get(f"/purchase-orders/{created['id']}")

    assert response.status_code == 200
    assert response.json()["order_id"] == 1007


def test_get_unknown_purchase_order_returns_404(test_client: TestClient):
    response = test_client.get("/purchase-orders/404")

    assert response.status_code == 404
    assert response.json()["error"] == "ORDER_NOT_FOUND"


def test_list_purchase_orders(test_client: TestClient):
    test_client.post("/purchase-orders", json=ORDER)
    test_client.post("/purchase-orders", json={**ORDER, "order_id": 1008})

    response = test_client.get("/purchase-orders", params={"limit": 10})

    assert response.status_code == 200
    assert sorted(order["order_id"] for order in response.json()) == [1007, 1008]


def test_manual_drains_walk_order_to_delivery(test_client: TestClient):
    created = test_client.post("/purchase-orders", json=ORDER).json()

    for _ in range(3):
        drain = test_client.post("/queue")
        assert drain.status_code == 200

    assert drain.json()["count_after"] == 0
    order = test_client.get(f"/purchase-orders/{created['id']}").json()
    assert order["status"] == "waiting_delivery"
    assert order["shipment_id"] == "SHIP-99"

    dropoff = test_client.post("/logistics/dropoff", json={"shipment_id": "SHIP-99", "quantity": 100})

    assert dropoff.status_code == 200, dropoff.text
    assert dropoff.json()["status"] == "delivered"


def test_dropoff_in_wrong_state_returns_409(test_client: TestClient):
    test_client.post("/purchase-orders", json=ORDER)
    test_client.post("/queue")
    test_client.post("/queue")

    response = test_client.post("/logistics/dropoff", json={"shipment_id": "SHIP-99", "quantity": 1})

    assert response.status_code == 409


def test_dropoff_for_unknown_shipment_returns_404(test_client: TestClient):
    response = test_client.post("/logistics/dropoff", json={"shipment_id": "nope", "quantity": 1})

    assert response.status_code == 404
