import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.catalogue_commands import catalogue_list, catalogue_show
from storefront.infrastructure.cli.customer_commands import customer_add, customer_list
from storefront.infrastructure.cli.shop_commands import shop
from storefront.infrastructure.structured_logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalogue, cart and orders."""
    config = settings()
    configure_logging(config.log_level, config.log_format)


@cli.group()
def catalogue() -> None:
    """Browse the catalogue."""


@cli.group()
def customer() -> None:
    """Manage recorded customer details."""


# Register subcommands
catalogue.add_command(catalogue_list)
catalogue.add_command(catalogue_show)
customer.add_command(customer_add)
customer.add_command(customer_list)
cli.add_command(shop)
