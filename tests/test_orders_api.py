"""Tests for the /orders endpoints."""

import pytest

SHIPPING = {"address": "1 Main St", "city": "Paris", "postalCode": "75001", "country": "FR"}


@pytest.fixture
def alice(create_user):
    return create_user()


@pytest.fixture
def admin(create_user):
    return create_user(name="Root", email="root@example.com", is_admin=True)


@pytest.fixture
def placed_order(client, alice, auth_headers, create_product):
    create_product("p1", stock=10)
    response = client.post(
        "/orders/",
        json={
            "cartItems": [{"_id": "p1", "qty": 2, "name": "Widget", "price": 10}],
            "shippingAddress": SHIPPING,
            "paymentMethod": "PayPal",
            "itemsPrice": 20,
            "shippingPrice": 5,
        },
        headers=auth_headers(alice),
    )
    assert response.status_code == 201
    return response.json()


class TestCreateOrder:
    def test_create_order(self, client, placed_order, alice):
        assert placed_order["totalPrice"] == 25
        assert placed_order["taxPrice"] == 0
        assert placed_order["userId"] == alice.id
        assert placed_order["isPaid"] is False
        assert placed_order["isDelivered"] is False
        assert placed_order["paymentResult"] is None
        assert placed_order["shippingAddress"] == SHIPPING
        assert placed_order["orderItems"] == [
            {"product": "p1", "name": "Widget", "image": None, "price": 10.0, "qty": 2}
        ]

        product = client.get("/products/p1").json()
        assert product["stock"] == 8

    def test_empty_cart(self, client, alice, auth_headers):
        response = client.post(
            "/orders/",
            json={"cartItems": [], "itemsPrice": 0, "shippingPrice": 0},
            headers=auth_headers(alice),
        )
        assert response.status_code == 400
        assert response.json() == {"message": "No order items."}

    def test_absent_cart(self, client, alice, auth_headers):
        response = client.post("/orders/", json={"itemsPrice": 10, "shippingPrice": 2}, headers=auth_headers(alice))
        assert response.status_code == 400
        assert response.json() == {"message": "No order items."}

    def test_malformed_body(self, client, alice, auth_headers):
        response = client.post(
            "/orders/",
            json={"cartItems": [{"qty": 1}]},
            headers=auth_headers(alice),
        )
        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid request body"
        assert data["errors"]

    def test_requires_authentication(self, client):
        response = client.post("/orders/", json={"cartItems": [{"_id": "p1", "qty": 1}]})
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized, no token"}


class TestPayAndDeliver:
    def test_pay(self, client, placed_order, alice, auth_headers):
        response = client.put(
            f"/orders/{placed_order['id']}/pay",
            json={"paidAt": "2024-01-01T00:00:00Z", "paymentId": "PAY-1", "email": "alice@example.com"},
            headers=auth_headers(alice),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["isPaid"] is True
        assert data["isDelivered"] is True
        assert data["paidAt"].startswith("2024-01-01T00:00:00")
        assert data["deliveredAt"].startswith("2024-01-02T00:00:00")
        assert data["paymentResult"] == {"paymentId": "PAY-1", "status": "paid", "email": "alice@example.com"}

    def test_pay_unknown_order(self, client, alice, auth_headers):
        response = client.put(
            "/orders/missing/pay",
            json={"paymentId": "PAY-1", "email": "alice@example.com"},
            headers=auth_headers(alice),
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Order not found!"}

    def test_deliver_requires_admin(self, client, placed_order, alice, auth_headers):
        response = client.put(f"/orders/{placed_order['id']}/deliver", json={}, headers=auth_headers(alice))
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized as an admin"}

    def test_deliver(self, client, placed_order, admin, auth_headers):
        response = client.put(
            f"/orders/{placed_order['id']}/deliver",
            json={"deliveredAt": "2024-02-03T10:00:00Z"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 200
        data = response.json()
        assert data["isDelivered"] is True
        assert data["deliveredAt"].startswith("2024-02-03T10:00:00")
        assert data["isPaid"] is False

    def test_deliver_without_body(self, client, placed_order, admin, auth_headers):
        response = client.put(f"/orders/{placed_order['id']}/deliver", headers=auth_headers(admin))
        assert response.status_code == 200
        assert response.json()["deliveredAt"] is not None


class TestRetrieval:
    def test_get_order(self, client, placed_order, alice, auth_headers):
        response = client.get(f"/orders/{placed_order['id']}", headers=auth_headers(alice))
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == placed_order["id"]
        assert data["user"] == {"name": "Alice", "email": "alice@example.com"}

    def test_get_unknown_order(self, client, alice, auth_headers):
        response = client.get("/orders/does-not-exist", headers=auth_headers(alice))
        assert response.status_code == 404
        assert response.json() == {"message": "Order not found!"}

    def test_list_orders_as_admin(self, client, placed_order, alice, admin, auth_headers):
        response = client.get("/orders/", headers=auth_headers(admin))
        assert response.status_code == 200
        data = response.json()
        assert [o["id"] for o in data] == [placed_order["id"]]
        assert data[0]["user"] == {"id": alice.id, "name": "Alice"}

    def test_list_orders_empty(self, client, admin, auth_headers):
        response = client.get("/orders/", headers=auth_headers(admin))
        assert response.status_code == 404
        assert response.json() == {"message": "Orders not found!"}

    def test_list_orders_requires_admin(self, client, placed_order, alice, auth_headers):
        response = client.get("/orders/", headers=auth_headers(alice))
        assert response.status_code == 401

    def test_my_orders(self, client, placed_order, alice, create_user, auth_headers):
        bob = create_user(name="Bob", email="bob@example.com")

        mine = client.get("/orders/my-orders", headers=auth_headers(alice))
        assert mine.status_code == 200
        assert [o["id"] for o in mine.json()] == [placed_order["id"]]

        theirs = client.get("/orders/my-orders", headers=auth_headers(bob))
        assert theirs.status_code == 404
        assert theirs.json() == {"message": "No orders found for the logged-in user."}


def test_health(client):
    assert client.get("/orders/health").json() == {"service": "order", "status": "running"}


def test_unknown_path_uses_message_shape(client):
    response = client.get("/nope/x")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}
