"""Interactive shopping session.

Reads one command per line until ``quit`` or end of input.  Every
command runs to completion before the next line is read; a rejected
command prints an error and leaves the cart and order history as they
were.
"""

from __future__ import annotations

import click
import structlog

from storefront.application.session import ShoppingSession
from storefront.domain.exceptions import DomainException
from storefront.domain.model.customer import CustomerInfo
from storefront.infrastructure.bootstrap import new_session, settings
from storefront.infrastructure.settings import StorefrontSettings
logger = structlog.get_logger(__name__)

HELP_TEXT = """\
Commands:
  list           show the catalogue
  show NAME      show an item's price and description
  add NAME       add an item to the cart
  remove NAME    remove an item from the cart
  cart           show the cart
  order          place an order for everything in the cart
  history        show the orders placed this session
  help           show this message
  quit           leave the shop"""


@click.command("shop")
@click.option(
    "--collect-customer",
    is_flag=True,
    default=False,
    help="Ask for customer details when an order is placed.",
)
def shop(collect_customer: bool) -> None:
    """Start an interactive shopping session."""
    config = settings()
    try:
        session = new_session(config)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(session.catalogue), nl=False)
    click.echo("Type 'help' for a list of commands.")

    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break

        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        argument = argument.strip()

        if command in ("quit", "exit"):
            break
        if not command:
            continue

        try:
            _dispatch(session, command, argument, collect_customer, config)
        except (DomainException, click.UsageError) as exc:
            logger.info("shop.command_rejected", command=command, error=str(exc))
            click.echo(f"Error: {exc}")


def _dispatch(
    session: ShoppingSession,
    command: str,
    argument: str,
    collect_customer: bool,
    config: StorefrontSettings,
) -> None:
    if command == "help":
        click.echo(HELP_TEXT)
    elif command == "list":
        click.echo(str(session.catalogue), nl=False)
    elif command == "show":
        item = session.select_item(_require(argument, command))
        click.echo(f"{item.name}: {item.price_string}")
        if item.description is not None:
            click.echo(item.description)
    elif command == "add":
        name = _require(argument, command)
        cart = session.add_to_cart(name)
        click.echo(f"Added {name}!")
        click.echo(cart.text, nl=False)
    elif command == "remove":
        cart = session.remove_from_cart(_require(argument, command))
        click.echo(cart.text, nl=False)
    elif command == "cart":
        click.echo(session.view_cart().text, nl=False)
    elif command == "order":
        _place_order(session, collect_customer, config)
    elif command == "history":
        if not len(session.history):
            click.echo("No orders have been placed yet.")
        else:
            click.echo(session.history_text(), nl=False)
    else:
        click.echo(f"Unknown command '{command}'. Type 'help' for a list of commands.")


def _place_order(
    session: ShoppingSession,
    collect_customer: bool,
    config: StorefrontSettings,
) -> None:
    customer = None
    # Empty carts are rejected before asking for any details
    if collect_customer and not session.cart.is_empty:
        customer = _prompt_customer(config)

    order = session.place_order(customer)
    click.echo(f"Order #{order.number} placed.")
    click.echo(order.text, nl=False)


def _prompt_customer(config: StorefrontSettings) -> CustomerInfo:
    name = click.prompt("Name", default="", show_default=False)
    address = click.prompt("Shipping address", default="", show_default=False)
    email = click.prompt("Email address", default="", show_default=False)
    payment = click.prompt("Credit card details", default="", show_default=False)
    return CustomerInfo.create(
        name,
        address,
        email,
        payment or None,
        require_payment_details=config.require_payment_details,
    )


def _require(argument: str, command: str) -> str:
    if not argument:
        raise click.UsageError(f"'{command}' needs an item name")
    return argument
