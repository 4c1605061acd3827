"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import DomainException, StorageError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Price
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._lock = threading.RLock()

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        with self._lock:
            records = self._file.load()
            if any(raw.get("id") == product.id for raw in records):
                raise StorageError(f"Product with ID '{product.id}' already exists")
            records.append(self._to_raw(product))
            self._file.persist(records)

    def get_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            for raw in self._file.load():
                if raw.get("id") == product_id:
                    return self._to_domain(raw)
        return None

    def replace(self, product: Product) -> None:
        with self._lock:
            records = self._file.load()
            for i, raw in enumerate(records):
                if raw.get("id") == product.id:
                    records[i] = self._to_raw(product)
                    self._file.persist(records)
                    return
        raise StorageError(f"Product with ID '{product.id}' vanished before update")

    def delete(self, product_id: str) -> None:
        with self._lock:
            records = self._file.load()
            remaining = [raw for raw in records if raw.get("id") != product_id]
            if len(remaining) != len(records):
                self._file.persist(remaining)

    def query(
        self,
        descending: bool = False,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Product]:
        with self._lock:
            products = [self._to_domain(raw) for raw in self._file.load()]
        # sorted() is stable, also with reverse=True
        products = sorted(products, key=lambda p: p.created_at, reverse=descending)
        end = None if limit is None else offset + limit
        return products[offset:end]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "created_at": product.created_at.isoformat(),
        }

    def _to_domain(self, raw: dict) -> Product:
        try:
            created_at = datetime.fromisoformat(raw["created_at"])
            if created_at.tzinfo is None:
                raise ValueError("created_at has no timezone")
            return Product(
                id=raw["id"],
                name=raw["name"],
                price=Price(Decimal(raw["price"])),
                created_at=created_at,
            )
        except (KeyError, TypeError, ValueError, InvalidOperation, DomainException) as exc:
            logger.error("Malformed product record in %s: %r", self._file.path, raw)
            raise StorageError(f"Malformed product record in {self._file.path.name}") from exc
