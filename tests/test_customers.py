"""
Customer endpoint tests.
"""


def customer_payload(**overrides):
    payload = {
        "first_name": "Grace",
        "last_name": "Hopper",
        "email": "grace@example.com",
        "address": "1 Compiler Way",
    }
    payload.update(overrides)
    return payload


class TestCustomerCrud:

    def test_create_get_list(self, test_client):
        response = test_client.post("/api/customers", json=customer_payload())

        assert response.status_code == 201
        created = response.json()
        assert created["id"] is not None
        assert created["email"] == "grace@example.com"

        expected = {**created, "shopping_carts": []}
        assert test_client.get(f"/api/customers/{created['id']}").json() == expected
        assert test_client.get("/api/customers").json() == [expected]

    def test_names_are_stripped(self, test_client):
        response = test_client.post(
            "/api/customers", json=customer_payload(first_name="  Grace  ")
        )
        assert response.json()["first_name"] == "Grace"

    def test_duplicate_email_is_rejected(self, test_client):
        test_client.post("/api/customers", json=customer_payload())

        response = test_client.post(
            "/api/customers", json=customer_payload(first_name="Other")
        )

        assert response.status_code == 400
        assert len(test_client.get("/api/customers").json()) == 1

    def test_validation_rules(self, test_client):
        bad_payloads = [
            customer_payload(first_name=""),
            customer_payload(first_name="R2D2"),
            customer_payload(last_name="x" * 51),
            customer_payload(email="not-an-email"),
            customer_payload(address=""),
            customer_payload(address="a" * 201),
            {"first_name": "Grace", "last_name": "Hopper", "email": "g@example.com"},
        ]
        for payload in bad_payloads:
            response = test_client.post("/api/customers", json=payload)
            assert response.status_code == 422, payload

    def test_update_replaces_fields(self, test_client):
        customer_id = test_client.post("/api/customers", json=customer_payload()).json()["id"]

        response = test_client.put(
            f"/api/customers/{customer_id}",
            json=customer_payload(last_name="Murray", address="2 Navy Yard"),
        )

        assert response.status_code == 200
        assert response.json()["last_name"] == "Murray"
        assert response.json()["address"] == "2 Navy Yard"

    def test_update_to_taken_email_is_rejected(self, test_client):
        test_client.post("/api/customers", json=customer_payload())
        other_id = test_client.post(
            "/api/customers", json=customer_payload(email="ada@example.com")
        ).json()["id"]

        response = test_client.put(
            f"/api/customers/{other_id}", json=customer_payload(email="grace@example.com")
        )

        assert response.status_code == 400

    def test_customer_view_includes_carts_and_contents(self, test_client, make_product):
        customer_id = test_client.post("/api/customers", json=customer_payload()).json()["id"]
        keyboard = make_product("Keyboard")
        mouse = make_product("Mouse", price=19.0)
        cart_id = test_client.post(
            "/api/shopping-cart/add-product",
            params={"customerId": customer_id, "productId": keyboard, "quantity": 2},
        ).json()["cartId"]
        test_client.post(
            "/api/shopping-cart/add-product",
            params={"customerId": customer_id, "cartId": cart_id, "productId": mouse, "quantity": 1},
        )

        response = test_client.get(f"/api/customers/{customer_id}")

        assert response.status_code == 200
        carts = response.json()["shopping_carts"]
        assert [c["id"] for c in carts] == [cart_id]
        assert carts[0]["customer_id"] == customer_id
        lines = [(i["product"]["name"], i["quantity"]) for i in carts[0]["items"]]
        assert lines == [("Keyboard", 2), ("Mouse", 1)]

        listing = test_client.get("/api/customers").json()
        assert listing[0]["shopping_carts"] == carts

    def test_missing_customer_returns_404(self, test_client):
        assert test_client.get("/api/customers/999").status_code == 404
        assert test_client.put("/api/customers/999", json=customer_payload()).status_code == 404
        assert test_client.delete("/api/customers/999").status_code == 404

    def test_delete(self, test_client):
        customer_id = test_client.post("/api/customers", json=customer_payload()).json()["id"]

        response = test_client.delete(f"/api/customers/{customer_id}")

        assert response.status_code == 204
        assert test_client.get(f"/api/customers/{customer_id}").status_code == 404

    def test_delete_customer_with_carts_is_rejected(self, test_client, make_product):
        customer_id = test_client.post("/api/customers", json=customer_payload()).json()["id"]
        product_id = make_product()
        test_client.post(
            "/api/shopping-cart/add-product",
            params={"customerId": customer_id, "productId": product_id, "quantity": 1},
        )

        response = test_client.delete(f"/api/customers/{customer_id}")

        assert response.status_code == 400
        assert test_client.get(f"/api/customers/{customer_id}").status_code == 200
