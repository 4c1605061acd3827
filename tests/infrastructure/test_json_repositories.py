"""Tests for the JSON-file repositories (real file I/O under tmp_path)."""

import json
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from storefront.application.product_service import ProductService
from storefront.application.user_service import UserService
from storefront.domain.exceptions import NotFoundError, StorageError
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Price
from storefront.infrastructure.persistence import json_file
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import JsonUserRepository

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == []

    def test_round_trip_preserves_fields(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = Product.create("Widget", "15.10")
        repo.add(product)

        reopened = JsonProductRepository(tmp_path / "products.json")
        found = reopened.get_by_id(product.id)
        assert found == product
        assert found.price.amount == Decimal("15.10")

    def test_add_duplicate_id(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = Product.create("Widget", 1)
        repo.add(product)
        with pytest.raises(StorageError, match="already exists"):
            repo.add(product)

    def test_service_crud(self, tmp_path):
        service = ProductService(JsonProductRepository(tmp_path / "products.json"))
        product = Product.create("Widget", 10)
        service.create(product)

        product.revise("Gizmo", 11)
        service.update(product)
        assert service.find_by_id(product.id).name == "Gizmo"

        service.delete(product.id)
        with pytest.raises(NotFoundError):
            service.find_by_id(product.id)

    def test_update_unknown_leaves_file_untouched(self, tmp_path):
        path = tmp_path / "products.json"
        service = ProductService(JsonProductRepository(path))
        service.create(Product.create("Widget", 10))
        before = path.read_text()

        with pytest.raises(NotFoundError):
            service.update(Product.create("Ghost", 1))
        assert path.read_text() == before

    def test_query_orders_and_windows(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for i in (3, 1, 2, 5, 4):
            repo.add(Product(
                id=f"p-{i}",
                name=f"Product {i}",
                price=Price(Decimal(i)),
                created_at=_EPOCH + timedelta(minutes=i),
            ))

        assert [p.id for p in repo.query()] == ["p-1", "p-2", "p-3", "p-4", "p-5"]
        assert [p.id for p in repo.query(descending=True)] == ["p-5", "p-4", "p-3", "p-2", "p-1"]
        assert [p.id for p in repo.query(offset=1, limit=2)] == ["p-2", "p-3"]

    def test_equal_timestamps_keep_insertion_order(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for i in range(5):
            repo.add(Product(id=f"p-{i}", name="Same", price=Price(Decimal(1)), created_at=_EPOCH))
        assert [p.id for p in repo.query()] == [f"p-{i}" for i in range(5)]

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json")
        repo = JsonProductRepository(path)
        with pytest.raises(StorageError, match="Could not read"):
            repo.query()

    def test_non_array_file(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('{"id": "1"}')
        with pytest.raises(StorageError, match="Corrupt"):
            JsonProductRepository(path).get_by_id("1")

    def test_malformed_record(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('[{"id": "1", "name": "Widget", "price": "-3", "created_at": "2024-01-01T00:00:00+00:00"}]')
        with pytest.raises(StorageError, match="Malformed"):
            JsonProductRepository(path).get_by_id("1")

    def test_timestamp_without_timezone(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('[{"id": "1", "name": "Widget", "price": "3", "created_at": "2024-01-01T00:00:00"}]')
        repo = JsonProductRepository(path)
        with pytest.raises(StorageError, match="Malformed"):
            repo.query()

    def test_failed_write_keeps_previous_content(self, tmp_path, monkeypatch):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.add(Product.create("Widget", 1))
        before = path.read_text()

        def _fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(json_file.os, "replace", _fail)
        with pytest.raises(StorageError, match="Could not write"):
            repo.add(Product.create("Gizmo", 2))

        assert path.read_text() == before
        assert sorted(p.name for p in tmp_path.iterdir()) == ["products.json"]

    def test_unusable_location_is_logged(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with caplog.at_level(logging.ERROR), pytest.raises(StorageError, match="Could not create"):
            JsonProductRepository(blocker / "products.json")
        assert "Could not create" in caplog.text

    def test_no_temp_file_left_behind(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.add(Product.create("Widget", 1))
        assert sorted(p.name for p in tmp_path.iterdir()) == ["products.json"]


class TestJsonUserRepository:

    def test_round_trip(self, tmp_path):
        service = UserService(JsonUserRepository(tmp_path / "users.json"))
        user = User.create("John Doe", "john@doe.com", "abc123")
        service.create(user)

        found = UserService(JsonUserRepository(tmp_path / "users.json")).find_by_email("john@doe.com")
        assert found == user
        assert found.validate_password("abc123")

    def test_find_by_id(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        user = User.create("John Doe", "john@doe.com", "abc123")
        repo.add(user)
        assert repo.get_by_id(user.id) == user
        assert repo.get_by_id("missing") is None

    def test_unknown_email(self, tmp_path):
        service = UserService(JsonUserRepository(tmp_path / "users.json"))
        with pytest.raises(NotFoundError):
            service.find_by_email("j@doe.com")

    def test_duplicate_email(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        repo.add(User.create("John Doe", "john@doe.com", "abc123"))
        with pytest.raises(StorageError, match="already registered"):
            repo.add(User.create("Johnny", "john@doe.com", "other"))

    def test_password_stored_hashed_on_disk(self, tmp_path):
        path = tmp_path / "users.json"
        JsonUserRepository(path).add(User.create("John Doe", "john@doe.com", "abc123"))
        assert "abc123" not in path.read_text()
