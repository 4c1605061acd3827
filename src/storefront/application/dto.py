"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals (such as password hashes) to the outside.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.model.product import Product
from storefront.domain.model.user import User


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    price: str  # formatted, e.g. "$15.00"
    created_at: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            created_at=product.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class UserDTO:
    """Output: a user without the password hash."""

    id: str
    name: str
    email: str

    @staticmethod
    def from_user(user: User) -> UserDTO:
        return UserDTO(id=user.id, name=user.name, email=user.email)


@dataclass(frozen=True)
class AccessToken:
    """Output: a signed bearer token and the moment it stops being valid."""

    access_token: str
    expires_at: datetime
    token_type: str = "bearer"
