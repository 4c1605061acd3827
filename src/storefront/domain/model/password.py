"""Password hashing and verification.

Hashes are bcrypt (``$2b$``) produced through pwdlib.  bcrypt only looks
at the first 72 bytes of its input, so longer secrets are refused
outright instead of being truncated.
"""

from __future__ import annotations

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.bcrypt import BcryptHasher

from storefront.domain.exceptions import ValidationError

MAX_PASSWORD_BYTES = 72
BCRYPT_ROUNDS = 12

_hasher = PasswordHash((BcryptHasher(rounds=BCRYPT_ROUNDS),))


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of *password*.

    Raises ValidationError if the password is longer than bcrypt can
    take.
    """
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
        )
    try:
        return _hasher.hash(password)
    except ValueError as exc:
        raise ValidationError(f"Password could not be hashed: {exc}") from exc


def verify_password(candidate: str, password_hash: str) -> bool:
    """Check *candidate* against a stored hash in constant time.

    A malformed or foreign hash counts as a mismatch.
    """
    if len(candidate.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    try:
        return _hasher.verify(candidate, password_hash)
    except (UnknownHashError, ValueError, TypeError):
        return False
