"""CLI commands for users and token issuance."""

from __future__ import annotations

import logging

import click

from storefront.application.dto import UserDTO
from storefront.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DomainException,
    NotFoundError,
)
from storefront.domain.model.user import User
from storefront.infrastructure.bootstrap import authentication_service, user_service
from storefront.infrastructure.cli.guards import load_settings

logger = logging.getLogger(__name__)


@click.command("create")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address (login key).")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True,
              help="Password (prompted when omitted).")
def user_create(name: str, email: str, password: str) -> None:
    """Register a new user."""
    service = user_service(load_settings())

    try:
        user = User.create(name=name, email=email, password=password)
        service.create(user)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = UserDTO.from_user(user)
    click.echo(f"User {dto.id} created for {dto.email}")


@click.command("token")
@click.option("--email", required=True, help="Registered email address.")
@click.option("--password", prompt=True, hide_input=True, help="Password.")
def user_token(email: str, password: str) -> None:
    """Issue a bearer token for a user."""
    settings = load_settings()

    try:
        auth = authentication_service(settings)
        token = auth.authenticate(email=email, password=password)
    except NotFoundError:
        logger.info("Token refused: unknown email %s", email)
        raise click.ClickException("invalid credentials")
    except AuthenticationError:
        logger.info("Token refused: wrong password for %s", email)
        raise click.ClickException("invalid credentials")
    except ConfigurationError as exc:
        logger.error("Token signing failed: %s", exc)
        raise click.ClickException(f"Configuration error: {exc}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(token.access_token)
    click.echo(f"Expires: {token.expires_at.strftime('%Y-%m-%d %H:%M:%S UTC')}")
