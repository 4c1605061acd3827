"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from storefront.domain.exceptions import StorageError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._lock = threading.RLock()

    def add(self, user: User) -> None:
        with self._lock:
            records = self._file.load()
            for raw in records:
                if raw.get("id") == user.id:
                    raise StorageError(f"User with ID '{user.id}' already exists")
                if raw.get("email") == user.email:
                    raise StorageError(f"Email '{user.email}' is already registered")
            records.append(
                {
                    "id": user.id,
                    "name": user.name,
                    "email": user.email,
                    "password": user.password,
                }
            )
            self._file.persist(records)

    def get_by_id(self, user_id: str) -> User | None:
        return self._find("id", user_id)

    def get_by_email(self, email: str) -> User | None:
        return self._find("email", email)

    def _find(self, key: str, value: str) -> User | None:
        with self._lock:
            records = self._file.load()
        for raw in records:
            if raw.get(key) == value:
                try:
                    return User(
                        id=raw["id"],
                        name=raw["name"],
                        email=raw["email"],
                        password=raw["password"],
                    )
                except KeyError as exc:
                    logger.error("Malformed user record in %s: missing %s", self._file.path, exc)
                    raise StorageError(
                        f"Malformed user record in {self._file.path.name}"
                    ) from exc
        return None
