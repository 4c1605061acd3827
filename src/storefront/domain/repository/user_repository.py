"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def add(self, user: User) -> None:
        """Insert a new user. Raises StorageError on a duplicate id or email."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user registered under this email, or None."""
