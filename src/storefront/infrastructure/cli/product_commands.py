"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import product_service
from storefront.infrastructure.cli.guards import load_settings, require_token, token_option


@click.command("add")
@token_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
def product_add(token: str, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    require_token(token)
    service = product_service(load_settings())

    try:
        product = Product.create(name=name, price=price)
        service.create(product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("show")
@token_option
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(token: str, product_id: str) -> None:
    """Show a single product."""
    require_token(token)
    service = product_service(load_settings())

    try:
        dto = ProductDTO.from_product(service.find_by_id(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"ID:      {dto.id}")
    click.echo(f"Name:    {dto.name}")
    click.echo(f"Price:   {dto.price}")
    click.echo(f"Created: {dto.created_at}")


@click.command("list")
@token_option
@click.option("--page", type=int, default=0, show_default=True, help="1-indexed page (0 = all).")
@click.option("--limit", type=int, default=0, show_default=True, help="Page size (0 = all).")
@click.option("--sort", default="asc", show_default=True, help="'asc' or 'desc' by creation time.")
def product_list(token: str, page: int, limit: int, sort: str) -> None:
    """List products in the catalog."""
    require_token(token)
    service = product_service(load_settings())

    try:
        products = [ProductDTO.from_product(p) for p in service.list(page, limit, sort)]
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10}  {'Created':<20}")
    click.echo("-" * 90)
    for p in products:
        click.echo(f"{p.id:<36} {p.name:<20} {p.price:>10}  {p.created_at:<20}")


@click.command("update")
@token_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(token: str, product_id: str, name: str, price: str) -> None:
    """Replace a product's name and price."""
    require_token(token)
    service = product_service(load_settings())

    try:
        product = service.find_by_id(product_id)
        product.revise(name=name, price=price)
        service.update(product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@token_option
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(token: str, product_id: str) -> None:
    """Remove a product from the catalog."""
    require_token(token)
    service = product_service(load_settings())

    try:
        service.delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")
