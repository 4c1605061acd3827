"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import logging

import click
from pydantic import ValidationError as SettingsError

from storefront.domain.exceptions import ConfigurationError, DomainException, NotFoundError
from storefront.domain.model.user import User
from storefront.infrastructure.bootstrap import authentication_service, user_service
from storefront.infrastructure.config import Settings, get_settings

logger = logging.getLogger(__name__)

token_option = click.option(
    "--token",
    envvar="STOREFRONT_TOKEN",
    required=True,
    help="Bearer token from 'user token' (or set STOREFRONT_TOKEN).",
)


def load_settings() -> Settings:
    try:
        return get_settings()
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")


def require_token(token: str) -> User:
    """Verify a bearer token and return the user it was issued to.

    Aborts the command when the token is invalid, expired or names a
    user that no longer exists.
    """
    settings = load_settings()
    try:
        claims = authentication_service(settings).verify(token)
        user = user_service(settings).find_by_id(claims["sub"])
    except ConfigurationError as exc:
        raise click.ClickException(f"Configuration error: {exc}")
    except NotFoundError:
        logger.info("Rejected bearer token: subject %s does not exist", claims["sub"])
        raise click.ClickException("Invalid token")
    except DomainException as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise click.ClickException(str(exc))
    logger.debug("Authenticated request for user %s", user.id)
    return user
