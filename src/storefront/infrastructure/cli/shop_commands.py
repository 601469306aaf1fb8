"""CLI commands for the catalog, pricing orders and notifying customers."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.factory.product_factory import ProductFactory
from storefront.domain.model.order import Order
from storefront.infrastructure.bootstrap import (
    DEFAULT_DISCOUNT,
    DISCOUNT_STRATEGIES,
    place_order_handler,
    product_repository,
    sample_catalog,
)
from storefront.infrastructure.notification.customer import Customer


@click.command("demo")
def demo() -> None:
    """Run the sample storefront flow."""
    repo = product_repository(sample_catalog())
    handler = place_order_handler(repo, DEFAULT_DISCOUNT)

    click.echo(handler.handle("Laptop").message)
    click.echo(handler.handle("Phone").message)

    order = Order()
    order.attach(Customer("Alice"))
    order.process()


@click.command("price")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", "amount", required=True, help="Base price (e.g. 15.00).")
@click.option("--gift-wrap", is_flag=True, default=False, help="Add gift wrapping.")
@click.option(
    "--discount",
    type=click.Choice(sorted(DISCOUNT_STRATEGIES)),
    default=DEFAULT_DISCOUNT,
    show_default=True,
    help="Discount strategy to apply.",
)
def price(name: str, amount: str, gift_wrap: bool, discount: str) -> None:
    """Price an order for a single ad-hoc product."""
    repo = product_repository()

    try:
        product = ProductFactory.create_product(name, amount, gift_wrap=gift_wrap)
        repo.add(product)
        dto = place_order_handler(repo, discount).handle(product.name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.message)


@click.command("notify")
@click.option(
    "--customer",
    "customers",
    required=True,
    multiple=True,
    help="Customer to notify; repeat for several.",
)
def notify(customers: tuple[str, ...]) -> None:
    """Process an order and notify every listed customer."""
    order = Order()
    for name in customers:
        order.attach(Customer(name))
    order.process()


@click.command("catalog")
def catalog() -> None:
    """List the sample catalog with base and computed prices."""
    products = product_repository(sample_catalog()).list_all()

    click.echo(f"{'Name':<20} {'Base':>10} {'Price':>10}")
    click.echo("-" * 42)
    for p in products:
        click.echo(f"{p.name:<20} {str(p.base_price):>10} {str(p.compute_price()):>10}")
