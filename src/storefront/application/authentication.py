"""Application service: credential check and bearer token issuance.

Tokens are stateless HS256 (by default) JWTs carrying ``sub`` (user id),
``iat`` and ``exp``.  There is no session store, no refresh and no
revocation: a token is valid until it expires.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import jwt

from storefront.application.dto import AccessToken
from storefront.application.user_service import UserService
from storefront.domain.exceptions import AuthenticationError, ConfigurationError

_REQUIRED_CLAIMS = ["sub", "exp"]


@dataclass(frozen=True)
class TokenSettings:
    """Signing configuration, fixed for the life of the process."""

    secret: str
    expires_in: int
    algorithm: str = "HS256"

    def __post_init__(self) -> None:
        if not self.secret:
            raise ConfigurationError("Token signing secret must not be empty")
        if self.expires_in <= 0:
            raise ConfigurationError(
                f"Token lifetime must be positive, got {self.expires_in}"
            )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthenticationService:

    def __init__(
        self,
        user_service: UserService,
        settings: TokenSettings,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._user_service = user_service
        self._settings = settings
        self._clock = clock

    def authenticate(self, email: str, password: str) -> AccessToken:
        """Exchange email and password for a signed access token.

        Raises NotFoundError for an unknown email and AuthenticationError
        for a wrong password.  Callers facing the outside world should
        report both the same way.
        """
        user = self._user_service.find_by_email(email)
        if not user.validate_password(password):
            raise AuthenticationError("Invalid credentials")

        now = self._clock().replace(microsecond=0)
        expires_at = now + timedelta(seconds=self._settings.expires_in)
        claims = {
            "sub": user.id,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        try:
            token = jwt.encode(
                claims,
                self._settings.secret,
                algorithm=self._settings.algorithm,
            )
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Could not sign access token: {exc}") from exc
        return AccessToken(access_token=token, expires_at=expires_at)

    def verify(self, token: str) -> dict[str, Any]:
        """Decode a token, checking signature and expiry.

        Returns the claim set.  Raises AuthenticationError for anything
        that is not a currently valid token signed with our secret.
        """
        try:
            return jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Invalid token") from exc
