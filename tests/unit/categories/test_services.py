"""Unit tests for CategoryService.

Covers:
- create / update: name normalisation and the "name is required" rule.
- get / delete: not found.
- delete: blocked while products reference the category.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.categories.services import IN_USE_MESSAGE, CategoryService
from modules.core.exceptions import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from modules.core.repositories.gateway import IntegrityViolation

pytestmark = pytest.mark.unit


@pytest.fixture()
def service(category_repo):
    return CategoryService(repository=category_repo)


# ===========================================================================
# create / get
# ===========================================================================


class TestCreateCategory:
    def test_created_row_has_trimmed_name(self, service):
        created = service.create({"name": "  Books "})

        assert created["name"] == "Books"
        assert service.get(created["id"])["name"] == "Books"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_persists_nothing(self, service, category_repo, name):
        with pytest.raises(ValidationError, match="Category name is required"):
            service.create({"name": name})
        assert category_repo.writes == 0


class TestGetCategory:
    def test_not_found_raises(self, service):
        with pytest.raises(NotFoundError, match="Category not found"):
            service.get(999)

    def test_string_ids_are_accepted(self, service):
        created = service.create({"name": "Books"})
        assert service.get(str(created["id"]))["id"] == created["id"]

    def test_malformed_id_is_a_persistence_error(self, service):
        with pytest.raises(PersistenceError):
            service.get("abc")

    @pytest.mark.parametrize("raw_id", [2**63, "99999999999999999999999", -(2**63) - 1])
    def test_id_outside_bigint_range_is_a_persistence_error(self, service, raw_id):
        with pytest.raises(PersistenceError, match="out of range"):
            service.get(raw_id)

    def test_bigint_bounds_are_looked_up(self, service):
        with pytest.raises(NotFoundError):
            service.get(2**63 - 1)


# ===========================================================================
# update
# ===========================================================================


class TestUpdateCategory:
    def test_renames_and_refreshes_updated_at(self, service):
        created = service.create({"name": "Books"})

        updated = service.update(created["id"], {"name": " Novels "})

        assert updated["name"] == "Novels"
        assert updated["updated_at"] >= created["updated_at"]
        assert updated["created_at"] == created["created_at"]

    @pytest.mark.parametrize("payload", [{}, {"name": "  "}, {"name": None}])
    def test_missing_name_mutates_nothing(self, service, category_repo, payload):
        created = service.create({"name": "Books"})
        writes = category_repo.writes

        with pytest.raises(ValidationError, match="Category name is required"):
            service.update(created["id"], payload)

        assert category_repo.writes == writes
        assert service.get(created["id"])["name"] == "Books"

    def test_not_found_raises(self, service):
        with pytest.raises(NotFoundError):
            service.update(999, {"name": "Ghost"})

    def test_blank_name_is_rejected_before_the_id_is_parsed(self, service):
        with pytest.raises(ValidationError, match="Category name is required"):
            service.update("abc", {"name": "  "})

    def test_malformed_id_with_valid_payload_is_a_persistence_error(self, service):
        with pytest.raises(PersistenceError):
            service.update("abc", {"name": "Books"})


# ===========================================================================
# delete
# ===========================================================================


class TestDeleteCategory:
    def test_deletes_unreferenced_category(self, service, category_repo):
        created = service.create({"name": "Home"})

        service.delete(created["id"])

        assert not category_repo.exists(created["id"])

    def test_referenced_category_is_kept(self, service, category_repo, product_repo):
        created = service.create({"name": "Books"})
        product_repo.create(
            {"name": "Practical SQL", "price": 32, "stock": 1, "category_id": created["id"]}
        )

        assert service.can_delete(created["id"]) is False
        with pytest.raises(ConflictError, match=IN_USE_MESSAGE):
            service.delete(created["id"])

        assert category_repo.exists(created["id"])

    def test_not_found_raises(self, service):
        with pytest.raises(NotFoundError, match="Category not found"):
            service.delete(999)


class TestDeleteCategoryWithMockRepository:
    @pytest.fixture()
    def mock_repo(self):
        repo = MagicMock()
        repo.count_products.return_value = 0
        return repo

    def test_guard_runs_before_delete_inside_transaction(self, mock_repo):
        calls = []
        mock_repo.atomic.return_value.__enter__.side_effect = lambda: calls.append("begin")
        mock_repo.lock_for_update.side_effect = lambda id: calls.append("lock")
        mock_repo.count_products.side_effect = lambda id: calls.append("count") or 0
        mock_repo.delete.side_effect = lambda id: calls.append("delete") or {"id": id}

        CategoryService(repository=mock_repo).delete("5")

        assert calls == ["begin", "lock", "count", "delete"]
        mock_repo.delete.assert_called_once_with(5)

    def test_blocked_delete_never_reaches_store(self, mock_repo):
        mock_repo.count_products.return_value = 3

        with pytest.raises(ConflictError):
            CategoryService(repository=mock_repo).delete(1)

        mock_repo.delete.assert_not_called()

    def test_foreign_key_violation_is_reported_as_conflict(self, mock_repo):
        mock_repo.delete.side_effect = IntegrityViolation("FOREIGN KEY constraint failed")

        with pytest.raises(ConflictError, match=IN_USE_MESSAGE):
            CategoryService(repository=mock_repo).delete(1)
