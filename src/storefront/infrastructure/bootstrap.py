"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.factory.product_factory import ProductFactory
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.discount import (
    DiscountStrategy,
    NoDiscountStrategy,
    PercentageOffStrategy,
)
from storefront.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

DISCOUNT_STRATEGIES: dict[str, type[DiscountStrategy]] = {
    "none": NoDiscountStrategy,
    "percentage": PercentageOffStrategy,
}
DEFAULT_DISCOUNT = "percentage"


def sample_catalog() -> list[Product]:
    """Products the demo and catalog commands start from."""
    return [
        ProductFactory.create_product("Laptop", "1000.00", gift_wrap=True),
        ProductFactory.create_product("Mouse", "25.00"),
    ]


def product_repository(
    products: list[Product] | None = None,
) -> InMemoryProductRepository:
    return InMemoryProductRepository(products)


def discount_strategy(name: str = DEFAULT_DISCOUNT) -> DiscountStrategy:
    try:
        return DISCOUNT_STRATEGIES[name]()
    except KeyError:
        raise ValidationError(
            f"Unknown discount '{name}'. "
            f"Choose from: {', '.join(sorted(DISCOUNT_STRATEGIES))}"
        ) from None


def place_order_handler(
    product_repo: ProductRepository,
    discount_name: str = DEFAULT_DISCOUNT,
) -> PlaceOrderHandler:
    return PlaceOrderHandler(
        product_repo=product_repo,
        discount=discount_strategy(discount_name),
    )
