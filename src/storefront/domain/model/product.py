"""Product capability and its variants.

Every product answers ``compute_price()``. A ``BasicProduct`` returns its
base price; a ``ProductDecorator`` owns one wrapped product and adjusts the
wrapped product's price. Decorators nest to any depth and can be used
anywhere a plain product is expected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.value_objects import Money

GIFT_WRAP_SURCHARGE = Money(Decimal("5.00"))


class Product(ABC):

    name: str  # catalog name, also the repository key
    base_price: Money

    @abstractmethod
    def compute_price(self) -> Money:
        """Return the price including every adjustment on this product."""


@dataclass(frozen=True)
class BasicProduct(Product):
    """A plain catalog product. Frozen: the base price never changes."""

    name: str
    base_price: Money

    def compute_price(self) -> Money:
        return self.base_price


class ProductDecorator(Product):
    """Wraps another product and delegates to it.

    Subclasses override ``_adjust`` to add their own term on top of the
    wrapped product's computed price.
    """

    def __init__(self, inner: Product) -> None:
        self._inner = inner

    @property
    def inner(self) -> Product:
        return self._inner

    @property  # type: ignore[override]
    def name(self) -> str:
        return self._inner.name

    @property  # type: ignore[override]
    def base_price(self) -> Money:
        return self._inner.base_price

    def compute_price(self) -> Money:
        return self._adjust(self._inner.compute_price())

    def _adjust(self, price: Money) -> Money:
        return price

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class GiftWrapDecorator(ProductDecorator):
    """Adds a fixed gift-wrap surcharge."""

    def _adjust(self, price: Money) -> Money:
        return price + GIFT_WRAP_SURCHARGE
