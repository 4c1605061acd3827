"""Integration tests for UserService."""

import pytest

from storefront.application.user_service import UserService
from storefront.domain.exceptions import NotFoundError, StorageError
from storefront.domain.model.user import User
from tests.fakes import FakeUserRepository


def _setup() -> tuple[UserService, User]:
    service = UserService(FakeUserRepository())
    user = User.create("John Doe", "john@doe.com", "abc123")
    service.create(user)
    return service, user


class TestUserService:

    def test_find_by_email(self):
        service, user = _setup()
        found = service.find_by_email("john@doe.com")
        assert found.id == user.id
        assert found.name == user.name
        assert found.password == user.password

    def test_find_by_unknown_email(self):
        service, _ = _setup()
        with pytest.raises(NotFoundError, match="j@doe.com"):
            service.find_by_email("j@doe.com")

    def test_find_by_id(self):
        service, user = _setup()
        assert service.find_by_id(user.id).email == "john@doe.com"

    def test_find_by_unknown_id(self):
        service, _ = _setup()
        with pytest.raises(NotFoundError):
            service.find_by_id("missing")

    def test_duplicate_email_is_storage_error(self):
        service, _ = _setup()
        with pytest.raises(StorageError, match="already registered"):
            service.create(User.create("Other John", "john@doe.com", "xyz"))
