"""Application service: product catalog CRUD and listing."""

from __future__ import annotations

from enum import Enum

from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | SortDirection | None) -> SortDirection:
        """Anything other than an exact "desc"/"descending" sorts ascending."""
        if isinstance(value, SortDirection):
            return value
        if value in ("desc", "descending"):
            return cls.DESC
        return cls.ASC


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def create(self, product: Product) -> None:
        self._product_repo.add(product)

    def find_by_id(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def update(self, product: Product) -> None:
        """Replace the stored record for ``product.id``.

        The existence check and the write are two separate storage
        calls; a concurrent delete in between is not detected.
        """
        self.find_by_id(product.id)
        self._product_repo.replace(product)

    def delete(self, product_id: str) -> None:
        self.find_by_id(product_id)
        self._product_repo.delete(product_id)

    def list(
        self,
        page: int = 0,
        limit: int = 0,
        sort: str | SortDirection | None = "",
    ) -> list[Product]:
        """Return products ordered by creation time.

        ``page`` is 1-indexed.  A window is applied only when both
        ``page`` and ``limit`` are non-zero; if either is zero every
        product is returned.
        """
        if page < 0 or limit < 0:
            raise ValidationError("Page and limit must not be negative")

        descending = SortDirection.parse(sort) is SortDirection.DESC
        if page and limit:
            return self._product_repo.query(
                descending=descending,
                offset=(page - 1) * limit,
                limit=limit,
            )
        return self._product_repo.query(descending=descending)
