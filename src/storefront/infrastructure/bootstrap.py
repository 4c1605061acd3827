"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.authentication import AuthenticationService
from storefront.application.product_service import ProductService
from storefront.application.user_service import UserService
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


def product_service(settings: Settings | None = None) -> ProductService:
    settings = settings or get_settings()
    return ProductService(JsonProductRepository(settings.DATA_DIR / "products.json"))


def user_service(settings: Settings | None = None) -> UserService:
    settings = settings or get_settings()
    return UserService(JsonUserRepository(settings.DATA_DIR / "users.json"))


def authentication_service(settings: Settings | None = None) -> AuthenticationService:
    settings = settings or get_settings()
    return AuthenticationService(user_service(settings), settings.token_settings())
