"""Application service: user registration and lookup."""

from __future__ import annotations

from storefront.domain.exceptions import NotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository


class UserService:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def create(self, user: User) -> None:
        """Persist a new user. Duplicate emails surface as StorageError."""
        self._user_repo.add(user)

    def find_by_email(self, email: str) -> User:
        """Return the user including its password hash."""
        user = self._user_repo.get_by_email(email)
        if user is None:
            raise NotFoundError(f"User with email '{email}' not found")
        return user

    def find_by_id(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID '{user_id}' not found")
        return user
