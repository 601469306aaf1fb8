"""Console-backed order observer."""

from __future__ import annotations

from dataclasses import dataclass

import click

from storefront.domain.model.order import OrderObserver


@dataclass(eq=False)
class Customer(OrderObserver):
    """Prints each notification it receives.

    Compared by identity, so detaching one customer never removes
    another customer who happens to share the name.
    """

    name: str

    def receive(self, message: str) -> None:
        click.echo(f"{self.name} received notification: {message}")
