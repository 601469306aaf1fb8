"""Discount strategies.

A strategy turns a price into a discounted price. The order service
receives one at construction, so new discounts plug in without touching
the service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from storefront.domain.model.value_objects import Money

# Customer pays 80% of the price.
PERCENTAGE_OFF_RATE = Decimal("0.8")


class DiscountStrategy(ABC):

    @abstractmethod
    def apply_discount(self, price: Money) -> Money:
        """Return the discounted price. Must not have side effects."""


class NoDiscountStrategy(DiscountStrategy):

    def apply_discount(self, price: Money) -> Money:
        return price


class PercentageOffStrategy(DiscountStrategy):
    """Fixed 20% off."""

    def apply_discount(self, price: Money) -> Money:
        return price * PERCENTAGE_OFF_RATE
