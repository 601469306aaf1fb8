import logging

import click

from storefront.infrastructure.cli.shop_commands import catalog, demo, notify, price


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Storefront — products, discounts, orders and notifications"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(catalog)
cli.add_command(demo)
cli.add_command(notify)
cli.add_command(price)
