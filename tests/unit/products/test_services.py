"""Unit tests for ProductService.

Covers:
- create: happy path, uniform required-field validation, unknown category.
- update: supplied fields only, insertion order, empty payloads, not found.
- get / list / delete.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import NotFoundError, ValidationError
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service(product_repo, category_repo):
    return ProductService(repository=product_repo, categories=category_repo)


@pytest.fixture()
def category(category_repo):
    return category_repo.create({"name": "Electronics"})


@pytest.fixture()
def product(service, category):
    return service.create(
        {"name": "Wireless Mouse", "price": "24.90", "stock": 10, "category_id": category["id"]}
    )


# ===========================================================================
# create
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, category):
        created = service.create(
            {"name": "Keyboard", "price": 89, "category_id": category["id"]}
        )

        assert created["name"] == "Keyboard"
        assert created["price"] == Decimal("89")
        assert created["stock"] == 0
        assert created["category_id"] == category["id"]

    def test_missing_price_persists_nothing(self, service, product_repo, category):
        with pytest.raises(ValidationError, match="Product price is required"):
            service.create({"name": "Keyboard", "category_id": category["id"]})
        assert product_repo.writes == 0

    def test_unknown_category_is_rejected(self, service, product_repo):
        with pytest.raises(ValidationError, match="Category does not exist"):
            service.create({"name": "Keyboard", "price": 10, "category_id": 999})
        assert product_repo.writes == 0


# ===========================================================================
# update
# ===========================================================================


class TestUpdateProduct:
    def test_changes_only_named_fields(self, service, product):
        updated = service.update(product["id"], {"stock": 3})

        assert updated["stock"] == 3
        assert updated["name"] == product["name"]
        assert updated["price"] == product["price"]
        assert updated["updated_at"] >= product["updated_at"]

    def test_empty_payload_fails_without_write(self, service, product_repo, product):
        writes = product_repo.writes

        with pytest.raises(ValidationError, match="^No fields to update$"):
            service.update(product["id"], {})

        assert product_repo.writes == writes

    def test_empty_payload_is_rejected_before_the_id_is_parsed(self, service, product_repo):
        with pytest.raises(ValidationError, match="^No fields to update$"):
            service.update("abc", {})
        assert product_repo.writes == 0

    def test_only_read_only_keys_count_as_empty(self, service, product):
        with pytest.raises(ValidationError, match="No fields to update"):
            service.update(
                product["id"],
                {"id": 42, "category_name": "", "created_at": "2025-10-16T01:15:56Z"},
            )

    def test_unknown_keys_are_dropped(self, service, product):
        updated = service.update(product["id"], {"name": "Mouse Pro", "updated_at": "x"})
        assert updated["name"] == "Mouse Pro"

    def test_moving_to_unknown_category_is_rejected(self, service, product):
        with pytest.raises(ValidationError, match="Category does not exist"):
            service.update(product["id"], {"category_id": 999})

    def test_not_found_raises(self, service):
        with pytest.raises(NotFoundError, match="Product not found"):
            service.update(999, {"name": "Ghost"})

    def test_fields_reach_repository_in_payload_order(self, category_repo):
        mock_repo = MagicMock()
        mock_repo.update.return_value = {"id": 1}
        category = category_repo.create({"name": "Electronics"})

        ProductService(repository=mock_repo, categories=category_repo).update(
            "1", {"stock": 4, "category_id": category["id"], "name": "Mouse"}
        )

        id, fields = mock_repo.update.call_args.args
        assert id == 1
        assert list(fields) == ["stock", "category_id", "name"]


# ===========================================================================
# get / list / delete
# ===========================================================================


class TestReadProducts:
    def test_get(self, service, product):
        assert service.get(product["id"])["name"] == "Wireless Mouse"

    def test_get_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.get(999)

    def test_list_delegates_to_repo(self):
        mock_repo = MagicMock()
        mock_repo.list.return_value = [{"id": 1}, {"id": 2}]

        result = ProductService(repository=mock_repo, categories=MagicMock()).list()

        assert len(result) == 2
        mock_repo.list.assert_called_once_with()


class TestDeleteProduct:
    def test_success(self, service, product_repo, product):
        service.delete(product["id"])
        assert not product_repo.exists(product["id"])

    def test_not_found_raises(self, service):
        with pytest.raises(NotFoundError, match="Product not found"):
            service.delete(999)
