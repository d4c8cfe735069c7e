"""CLI commands for stored customer details."""

from __future__ import annotations

import click

from storefront.application.customer_records import (
    ListCustomersHandler,
    RecordCustomerHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import customer_repository, settings


@click.command("list")
def customer_list() -> None:
    """Show every customer record saved with an order."""
    handler = ListCustomersHandler(customer_repo=customer_repository(settings()))

    try:
        customers = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customer information recorded.")
        return

    for record in customers:
        click.echo(f"Customer Name: {record.name}")
        click.echo(f"Shipping Address: {record.shipping_address}")
        click.echo(f"Email Address: {record.email_address}")
        click.echo(f"Credit Card Details: {record.payment_details}")
        click.echo("--------")


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--email", required=True, help="Email address.")
@click.option("--payment", default=None, help="Credit card details.")
def customer_add(name: str, address: str, email: str, payment: str | None) -> None:
    """Record customer details without placing an order."""
    config = settings()
    handler = RecordCustomerHandler(
        customer_repo=customer_repository(config),
        require_payment_details=config.require_payment_details,
    )

    try:
        record = handler.handle(name, address, email, payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer '{record.name}' recorded.")
