"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass

PRODUCT_NOT_FOUND_MESSAGE = "Product not found."


@dataclass(frozen=True)
class OrderPlacementDTO:
    """Output: the outcome of placing an order for one product."""

    product_name: str
    found: bool
    final_price: str | None = None  # two decimals, e.g. "804.00"

    @property
    def message(self) -> str:
        if not self.found:
            return PRODUCT_NOT_FOUND_MESSAGE
        return (
            f"Order placed for {self.product_name} "
            f"with final price {self.final_price}"
        )
