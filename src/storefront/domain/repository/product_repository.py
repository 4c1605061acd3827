"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Insert a new product. Raises StorageError if the id is taken."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def replace(self, product: Product) -> None:
        """Overwrite the stored record that has the same ID."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove the record with this ID."""

    @abstractmethod
    def query(
        self,
        descending: bool = False,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Product]:
        """Return products ordered by ``created_at``.

        Records with equal timestamps keep their insertion order.
        ``limit=None`` means no upper bound.
        """
