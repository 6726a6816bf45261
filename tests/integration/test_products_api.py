def test_create_and_fetch_product(client, create_product):
    created = create_product()

    response = client.get(f"/products/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Product retrieved successfully"
    assert body["object"]["name"] == "Mechanical Keyboard"
    assert body["object"]["userId"] is not None
    assert body["object"]["images"] is None


def test_create_product_validation(client, admin_headers):
    response = client.post(
        "/products", json={"name": "", "price": -5, "stock": 1.5}, headers=admin_headers
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Product creation failed"
    assert "Product name is required" in body["errors"]
    assert "Product price must be a positive number" in body["errors"]


def test_unknown_product(client):
    response = client.get("/products/does-not-exist")

    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


def test_list_is_paginated(client, create_product):
    for index in range(3):
        create_product(name=f"Item {index}")

    response = client.get("/products", params={"page": 2, "limit": 2})

    body = response.json()
    assert response.status_code == 200
    assert body["pageNumber"] == 2
    assert body["pageSize"] == 2
    assert body["totalSize"] == 3
    assert body["totalPages"] == 2
    assert len(body["object"]) == 1


def test_invalid_pagination_falls_back_to_defaults(client, create_product):
    create_product()

    body = client.get("/products", params={"page": "abc", "limit": "-3"}).json()

    assert body["pageNumber"] == 1
    assert body["pageSize"] == 10


def test_huge_page_is_clamped(client, create_product):
    create_product()

    response = client.get("/products", params={"page": "99999999999999999999"})

    assert response.status_code == 200
    body = response.json()
    assert body["pageNumber"] == 1_000_000
    assert body["object"] == []


def test_search_with_separator_does_not_share_cache_entry(client, create_product):
    create_product(name="x widget", category="tools")

    forged = client.get("/products", params={"search": "x:category:tools"})
    split = client.get("/products", params={"search": "x", "category": "tools"})

    assert forged.json()["totalSize"] == 0
    assert split.headers["X-Cache"] == "MISS"
    assert split.json()["totalSize"] == 1


def test_search_category_and_sort(client, create_product):
    create_product(name="Cheap Cable", price=5, category="accessories")
    create_product(name="Pricey Cable", price=50, category="accessories")
    create_product(name="Desk", price=120, category="furniture")

    body = client.get(
        "/products", params={"search": "cable", "category": "accessories", "sort": "price_desc"}
    ).json()

    assert [item["name"] for item in body["object"]] == ["Pricey Cable", "Cheap Cable"]


def test_list_is_cached_until_catalog_changes(client, create_product):
    product = create_product()

    first = client.get("/products")
    second = client.get("/products")
    assert first.headers["X-Cache"] == "MISS"
    assert second.headers["X-Cache"] == "HIT"
    assert second.json() == first.json()

    create_product(name="Another")

    third = client.get("/products")
    assert third.headers["X-Cache"] == "MISS"
    assert third.json()["totalSize"] == 2
    assert product["id"] in {item["id"] for item in third.json()["object"]}


def test_update_invalidates_detail_cache(client, create_product, admin_headers):
    product = create_product()
    client.get(f"/products/{product['id']}")

    response = client.put(
        f"/products/{product['id']}", json={"price": 79.5}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["object"]["price"] == 79.5

    fresh = client.get(f"/products/{product['id']}")
    assert fresh.headers["X-Cache"] == "MISS"
    assert fresh.json()["object"]["price"] == 79.5
    assert fresh.json()["object"]["updatedAt"] is not None


def test_update_without_fields(client, create_product, admin_headers):
    product = create_product()

    response = client.put(f"/products/{product['id']}", json={}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errors"] == ["No product fields provided"]


def test_delete_product(client, create_product, admin_headers):
    product = create_product()

    response = client.delete(f"/products/{product['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Product deleted successfully"

    assert client.get(f"/products/{product['id']}").status_code == 404
    assert client.delete(f"/products/{product['id']}", headers=admin_headers).status_code == 404
