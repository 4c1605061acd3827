"""Product aggregate.

Products have their own lifecycle: they are added to the catalog,
revised as a whole (name and price together) and eventually removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Price, new_id


def _clean_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products: it validates the input
    and assigns the identifier and creation timestamp.  The plain
    ``__init__`` lets repositories reconstitute stored records as-is.
    """

    id: str
    name: str
    price: Price
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, name: str, price: str | float | int | Decimal) -> Product:
        return cls(
            id=new_id(),
            name=_clean_name(name),
            price=Price.of(price),
            created_at=datetime.now(timezone.utc),
        )

    def revise(self, name: str, price: str | float | int | Decimal) -> None:
        """Replace every mutable field; id and created_at stay put.

        Both values are validated before either is assigned.
        """
        new_name = _clean_name(name)
        new_price = Price.of(price)
        self.name = new_name
        self.price = new_price
