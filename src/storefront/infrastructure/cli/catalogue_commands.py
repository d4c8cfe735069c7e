"""CLI commands for browsing the catalogue."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException, ItemNotFoundError
from storefront.infrastructure.bootstrap import load_catalogue, settings


@click.command("list")
def catalogue_list() -> None:
    """List every item in the catalogue."""
    try:
        catalogue = load_catalogue(settings())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(catalogue), nl=False)


@click.command("show")
@click.argument("name")
def catalogue_show(name: str) -> None:
    """Show the price and description of a single item."""
    try:
        item = load_catalogue(settings()).find_item(name)
        if item is None:
            raise ItemNotFoundError(f"No such item '{name}' found in catalogue")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(item.name)
    click.echo(f"Price: {item.price_string}")
    if item.description is not None:
        click.echo(f"Description: {item.description}")
