"""
Product catalog endpoint tests.
"""
from storefront.models.product import ProductCategory


def product_payload(name="Keyboard", price=49.5, category="TECH", rating=4.0):
    return {"name": name, "price": price, "category": category, "rating": rating}


class TestCreateAndRead:

    def test_create_batch_and_fetch(self, test_client):
        response = test_client.post(
            "/products",
            json=[product_payload("Keyboard"), product_payload("Lipstick", 9.99, "BEAUTY", None)],
        )

        assert response.status_code == 201
        created = response.json()
        assert [p["name"] for p in created] == ["Keyboard", "Lipstick"]
        assert all(p["id"] is not None for p in created)
        assert created[1]["rating"] is None

        fetched = test_client.get(f"/products/{created[0]['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created[0]

        listing = test_client.get("/products").json()
        assert [p["id"] for p in listing] == [p["id"] for p in created]

    def test_invalid_product_in_batch_rejects_whole_batch(self, test_client):
        response = test_client.post(
            "/products",
            json=[product_payload("Keyboard"), product_payload("Mouse 3000")],
        )

        assert response.status_code == 422
        assert test_client.get("/products").json() == []

    def test_validation_rules(self, test_client):
        bad_payloads = [
            product_payload(name=""),
            product_payload(name="x" * 101),
            product_payload(price=-1),
            product_payload(rating=5.5),
            product_payload(rating=-0.1),
            product_payload(category="WEAPONS"),
            {"name": "Keyboard", "category": "TECH"},
            {**product_payload(), "colour": "red"},
        ]
        for payload in bad_payloads:
            response = test_client.post("/products", json=[payload])
            assert response.status_code == 422, payload

    def test_unknown_product_returns_404(self, test_client):
        response = test_client.get("/products/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found with ID: 999"


class TestUpdateAndDelete:

    def test_update_replaces_fields(self, test_client, make_product):
        product_id = make_product()

        response = test_client.put(
            f"/products/{product_id}",
            json=product_payload("Mechanical Keyboard", 120.0, "TECH", None),
        )

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "id": product_id,
            "name": "Mechanical Keyboard",
            "price": 120.0,
            "category": "TECH",
            "rating": None,
        }

    def test_update_unknown_product(self, test_client):
        response = test_client.put("/products/999", json=product_payload())
        assert response.status_code == 404

    def test_delete(self, test_client, make_product):
        product_id = make_product()

        assert test_client.delete(f"/products/{product_id}").status_code == 204
        assert test_client.get(f"/products/{product_id}").status_code == 404
        assert test_client.delete(f"/products/{product_id}").status_code == 404

    def test_delete_product_in_cart_is_rejected(self, test_client, make_customer, make_product):
        customer_id = make_customer()
        product_id = make_product()
        test_client.post(
            "/api/shopping-cart/add-product",
            params={"customerId": customer_id, "productId": product_id, "quantity": 1},
        )

        response = test_client.delete(f"/products/{product_id}")

        assert response.status_code == 400
        assert test_client.get(f"/products/{product_id}").status_code == 200


class TestSearch:

    def test_case_insensitive_substring(self, test_client, make_product):
        make_product("Gaming Keyboard")
        make_product("Keyboard Cover")
        make_product("Mouse")

        response = test_client.get("/products/search", params={"name": "KEYB"})

        assert response.status_code == 200
        assert sorted(p["name"] for p in response.json()) == ["Gaming Keyboard", "Keyboard Cover"]

    def test_no_match_returns_404(self, test_client, make_product):
        make_product("Mouse")

        response = test_client.get("/products/search", params={"name": "lamp"})

        assert response.status_code == 404
        assert response.json()["detail"] == "No products found with name: lamp"

    def test_wildcard_characters_match_literally(self, test_client, make_product):
        make_product("Keyboard")
        make_product("Mouse")

        for term in ("%", "_", "K%d"):
            response = test_client.get("/products/search", params={"name": term})
            assert response.status_code == 404, term


class TestSuggested:

    def test_filters_and_orders_by_rating(self, test_client, make_product):
        low = make_product("Cable", rating=2.0)
        high = make_product("Laptop", rating=4.8)
        unrated = make_product("Adapter", rating=None)
        excluded = make_product("Monitor", rating=5.0)
        make_product("Novel", category=ProductCategory.BOOKS, rating=5.0)

        response = test_client.get(
            "/products/suggested",
            params={"excludedProductIds": [excluded], "categories": ["TECH"]},
        )

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [high, low, unrated]

    def test_several_categories(self, test_client, make_product):
        tech = make_product("Laptop", rating=3.0)
        book = make_product("Novel", category=ProductCategory.BOOKS, rating=4.0)
        make_product("Lipstick", category=ProductCategory.BEAUTY, rating=5.0)

        response = test_client.get(
            "/products/suggested",
            params={"categories": ["TECH", "BOOKS"]},
        )

        assert [p["id"] for p in response.json()] == [book, tech]

    def test_nothing_to_suggest_returns_204(self, test_client, make_product):
        product_id = make_product("Laptop")

        response = test_client.get(
            "/products/suggested",
            params={"excludedProductIds": [product_id], "categories": ["TECH"]},
        )

        assert response.status_code == 204
        assert response.content == b""
