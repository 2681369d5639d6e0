"""Tests for product API endpoints."""

from uuid import uuid4

from app.domain.entities import NewProduct, ProductPatch
from app.domain.exceptions import (
    CatalogInternalError,
    ProductConflictError,
    ProductNotFoundError,
)
from app.domain.value_objects import Gender

CREATE_BODY = {
    "title": "Men's Chill Crew Neck Sweatshirt",
    "price": 75,
    "stock": 7,
    "sizes": ["S", "M", "L"],
    "gender": "men",
    "tags": ["sweatshirt"],
    "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
}


# ============================================================================
# POST /products
# ============================================================================


class TestCreateProduct:
    """Tests for POST /products."""

    def test_create_product(self, client, mock_catalog, sample_product):
        """Should create and return the product with image URLs."""
        mock_catalog.create.return_value = sample_product

        response = client.post("/products", json=CREATE_BODY)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == sample_product.id
        assert data["images"] == list(sample_product.images)
        assert data["gender"] == "men"

        new_product = mock_catalog.create.call_args.args[0]
        assert isinstance(new_product, NewProduct)
        assert new_product.slug is None
        assert new_product.images == tuple(CREATE_BODY["images"])
        assert new_product.gender == Gender.MEN

    def test_create_conflict(self, client, mock_catalog):
        """Uniqueness violations map to 409 with the constraint detail."""
        mock_catalog.create.side_effect = ProductConflictError(
            "Key (title)=(Men's Chill Crew Neck Sweatshirt) already exists."
        )

        response = client.post("/products", json=CREATE_BODY)

        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "PRODUCT_CONFLICT"
        assert "already exists" in data["message"]

    def test_create_internal_error_is_opaque(self, client, mock_catalog):
        mock_catalog.create.side_effect = CatalogInternalError()

        response = client.post("/products", json=CREATE_BODY)

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["message"] == "Unexpected error, check server logs"

    def test_create_rejects_empty_title(self, client, mock_catalog):
        response = client.post("/products", json={**CREATE_BODY, "title": ""})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        mock_catalog.create.assert_not_called()

    def test_create_rejects_empty_slug(self, client, mock_catalog):
        response = client.post("/products", json={**CREATE_BODY, "slug": ""})
        assert response.status_code == 422
        mock_catalog.create.assert_not_called()

    def test_create_rejects_unknown_gender(self, client, mock_catalog):
        response = client.post("/products", json={**CREATE_BODY, "gender": "robots"})
        assert response.status_code == 422
        mock_catalog.create.assert_not_called()

    def test_create_rejects_negative_stock(self, client, mock_catalog):
        response = client.post("/products", json={**CREATE_BODY, "stock": -1})
        assert response.status_code == 422

    def test_create_requires_sizes_and_tags(self, client, mock_catalog):
        body = {k: v for k, v in CREATE_BODY.items() if k not in ("sizes", "tags")}
        response = client.post("/products", json=body)
        assert response.status_code == 422


# ============================================================================
# GET /products
# ============================================================================


class TestListProducts:
    """Tests for GET /products."""

    def test_list_defaults(self, client, mock_catalog, sample_product):
        mock_catalog.find_all.return_value = [sample_product]

        response = client.get("/products")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [sample_product.id]
        mock_catalog.find_all.assert_awaited_once_with(limit=5, offset=0)

    def test_list_pagination(self, client, mock_catalog):
        mock_catalog.find_all.return_value = []

        response = client.get("/products?limit=2&offset=1")

        assert response.status_code == 200
        assert response.json() == []
        mock_catalog.find_all.assert_awaited_once_with(limit=2, offset=1)

    def test_list_rejects_zero_limit(self, client, mock_catalog):
        response = client.get("/products?limit=0")
        assert response.status_code == 422
        mock_catalog.find_all.assert_not_called()

    def test_list_rejects_negative_offset(self, client, mock_catalog):
        response = client.get("/products?offset=-1")
        assert response.status_code == 422


# ============================================================================
# GET /products/{term}
# ============================================================================


class TestGetProduct:
    """Tests for GET /products/{term}."""

    def test_get_by_term(self, client, mock_catalog, sample_product):
        mock_catalog.find_one.return_value = sample_product

        response = client.get("/products/MENS_CHILL_CREW_NECK_SWEATSHIRT")

        assert response.status_code == 200
        assert response.json()["slug"] == sample_product.slug
        mock_catalog.find_one.assert_awaited_once_with("MENS_CHILL_CREW_NECK_SWEATSHIRT")

    def test_get_not_found(self, client, mock_catalog):
        mock_catalog.find_one.side_effect = ProductNotFoundError("missing")

        response = client.get("/products/missing")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert data["details"][0]["message"] == "missing"

    def test_error_carries_request_id(self, client, mock_catalog):
        mock_catalog.find_one.side_effect = ProductNotFoundError("missing")

        response = client.get("/products/missing", headers={"X-Request-ID": "req-123"})

        assert response.json()["request_id"] == "req-123"
        assert response.headers["X-Request-ID"] == "req-123"


# ============================================================================
# PATCH /products/{id}
# ============================================================================


class TestUpdateProduct:
    """Tests for PATCH /products/{id}."""

    def test_update_images(self, client, mock_catalog, sample_product):
        mock_catalog.update.return_value = sample_product

        response = client.patch(
            f"/products/{sample_product.id}",
            json={"images": ["a.jpg", "b.jpg"], "stock": 2},
        )

        assert response.status_code == 200
        product_id, patch = mock_catalog.update.call_args.args
        assert product_id == sample_product.id
        assert isinstance(patch, ProductPatch)
        assert patch.images == ("a.jpg", "b.jpg")
        assert patch.stock == 2
        assert patch.title is None

    def test_update_without_images(self, client, mock_catalog, sample_product):
        mock_catalog.update.return_value = sample_product

        client.patch(f"/products/{sample_product.id}", json={"price": 10})

        _, patch = mock_catalog.update.call_args.args
        assert patch.images is None
        assert patch.price == 10

    def test_update_not_found(self, client, mock_catalog):
        mock_catalog.update.side_effect = ProductNotFoundError("x")
        response = client.patch(f"/products/{uuid4()}", json={"stock": 1})
        assert response.status_code == 404

    def test_update_conflict(self, client, mock_catalog):
        mock_catalog.update.side_effect = ProductConflictError("Key (slug)=(x) already exists.")
        response = client.patch(f"/products/{uuid4()}", json={"slug": "x"})
        assert response.status_code == 409

    def test_update_rejects_empty_slug(self, client, mock_catalog):
        response = client.patch(f"/products/{uuid4()}", json={"slug": ""})
        assert response.status_code == 422
        mock_catalog.update.assert_not_called()

    def test_update_requires_uuid(self, client, mock_catalog):
        response = client.patch("/products/not-a-uuid", json={"stock": 1})
        assert response.status_code == 422
        mock_catalog.update.assert_not_called()


# ============================================================================
# DELETE /products/{id}
# ============================================================================


class TestDeleteProduct:
    """Tests for DELETE /products/{id}."""

    def test_delete(self, client, mock_catalog):
        mock_catalog.remove.return_value = 1
        product_id = str(uuid4())

        response = client.delete(f"/products/{product_id}")

        assert response.status_code == 200
        assert response.json() == {"affected": 1}
        mock_catalog.remove.assert_awaited_once_with(product_id)

    def test_delete_not_found(self, client, mock_catalog):
        mock_catalog.remove.side_effect = ProductNotFoundError("x")
        response = client.delete(f"/products/{uuid4()}")
        assert response.status_code == 404


# ============================================================================
# GET /seed
# ============================================================================


class TestSeed:
    """Tests for GET /seed."""

    def test_seed(self, client, mock_seed):
        response = client.get("/seed")

        assert response.status_code == 200
        assert response.json() == {"message": "Seed executed"}
        mock_seed.execute_seed.assert_awaited_once()

    def test_seed_failure(self, client, mock_seed):
        mock_seed.execute_seed.side_effect = CatalogInternalError()
        response = client.get("/seed")
        assert response.status_code == 500
