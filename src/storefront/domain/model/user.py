"""User aggregate.

A user is created once and never updated.  ``password`` always holds a
bcrypt hash; the plaintext never leaves ``User.create()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.password import hash_password, verify_password
from storefront.domain.model.value_objects import new_id


@dataclass
class User:
    id: str
    name: str
    email: str
    password: str  # bcrypt hash

    @classmethod
    def create(cls, name: str, email: str, password: str) -> User:
        """Build a new user, hashing the password.

        Email format is not checked here; that is up to the caller.
        Raises ValidationError for an empty name or an oversized password.
        """
        if not name or not name.strip():
            raise ValidationError("User name is required")
        return cls(
            id=new_id(),
            name=name.strip(),
            email=email,
            password=hash_password(password),
        )

    def validate_password(self, candidate: str) -> bool:
        return verify_password(candidate, self.password)
