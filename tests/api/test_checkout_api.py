"""Checkout and order endpoints via TestClient."""


def _line(product_id=1, price=10, quantity=1):
    return {
        "productId": product_id,
        "title": f"Product {product_id}",
        "price": price,
        "quantity": quantity,
        "image": "u",
    }


def _payload(**overrides):
    data = {
        "customerName": "Jan Kowalski",
        "customerEmail": "jan@example.com",
        "cartItems": [_line(1, price=10, quantity=2), _line(2, price=5, quantity=1)],
    }
    data.update(overrides)
    return data


def _checkout(client, **overrides):
    response = client.post("/checkout", json=_payload(**overrides))
    assert response.status_code == 201
    return response.json()["data"]


class TestCheckoutEndpoint:
    def test_checkout_returns_receipt(self, client):
        response = client.post("/checkout", json=_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Order placed successfully"

        data = body["data"]
        assert data["total"] == 25.0
        assert data["status"] == "completed"
        assert data["itemCount"] == 2
        assert data["customerName"] == "Jan Kowalski"
        assert data["customerEmail"] == "jan@example.com"
        assert data["cartCleared"] is True
        assert data["orderId"]
        assert data["timestamp"]

    def test_checkout_clears_stored_cart(self, client):
        client.post(
            "/cart",
            json={"productId": 1, "title": "Shirt", "price": 10, "quantity": 2, "image": "u"},
        )

        _checkout(client)

        assert client.get("/cart").json()["data"]["items"] == []

    def test_empty_items_is_400(self, client):
        response = client.post("/checkout", json=_payload(cartItems=[]))

        assert response.status_code == 400
        assert response.json()["message"] == "Cart is empty. Cannot checkout"
        assert client.get("/checkout").json()["data"] == []

    def test_missing_customer_is_400(self, client):
        response = client.post("/checkout", json=_payload(customerName=None))

        assert response.status_code == 400
        assert "customerName" in response.json()["message"]

    def test_invalid_email_is_400(self, client):
        response = client.post("/checkout", json=_payload(customerEmail="not-an-email"))

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid email format"

    def test_zero_total_is_400(self, client):
        response = client.post("/checkout", json=_payload(cartItems=[_line(price=0)]))

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid total amount"

    def test_nan_price_is_400(self, client):
        body = (
            '{"customerName": "Jan", "customerEmail": "jan@example.com", '
            '"cartItems": [{"productId": 1, "title": "Shirt", "price": NaN, "quantity": 1, "image": "u"}]}'
        )

        response = client.post("/checkout", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert client.get("/checkout").json()["data"] == []


class TestOrdersEndpoints:
    def test_no_orders(self, client):
        response = client.get("/checkout")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "No orders found"
        assert body["data"] == []
        assert body["count"] == 0

    def test_list_orders(self, client):
        first = _checkout(client)
        second = _checkout(client)

        body = client.get("/checkout").json()

        assert body["count"] == 2
        assert {o["id"] for o in body["data"]} == {first["orderId"], second["orderId"]}
        order = body["data"][0]
        assert order["userId"] == "test-user"
        assert order["status"] == "completed"
        assert order["cartItems"][0]["productId"] == 1

    def test_get_order(self, client):
        receipt = _checkout(client)

        response = client.get(f"/checkout/{receipt['orderId']}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == receipt["orderId"]
        assert data["total"] == 25.0
        assert len(data["cartItems"]) == 2

    def test_unknown_order_is_404(self, client):
        response = client.get("/checkout/does-not-exist")

        assert response.status_code == 404
        assert response.json()["message"] == "Order not found"

    def test_blank_order_id_is_400(self, client):
        response = client.get("/checkout/%20")

        assert response.status_code == 400
        assert response.json()["message"] == "Order ID is required"
