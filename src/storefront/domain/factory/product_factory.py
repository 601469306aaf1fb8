"""Factory for catalog products."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import BasicProduct, GiftWrapDecorator, Product
from storefront.domain.model.value_objects import Money


class ProductFactory:

    @staticmethod
    def create_product(
        name: str,
        price: str | int | float | Decimal | Money,
        gift_wrap: bool = False,
    ) -> Product:
        """Build a basic product, wrapped once in gift wrap if requested.

        The name is stripped of surrounding whitespace and doubles as the
        repository key. Raises ValidationError for a blank name or an
        invalid, non-finite or negative price.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product: Product = BasicProduct(name=name.strip(), base_price=Money.of(price))
        if gift_wrap:
            product = GiftWrapDecorator(product)
        return product
