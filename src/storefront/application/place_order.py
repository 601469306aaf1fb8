"""Application service: Place Order use case.

Both collaborators are injected, so a different catalog or discount
can be supplied without changing this handler.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderPlacementDTO
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.discount import DiscountStrategy

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount: DiscountStrategy,
    ) -> None:
        self._product_repo = product_repo
        self._discount = discount

    def handle(self, product_name: str) -> OrderPlacementDTO:
        """Price an order for a single product.

        A missing product is an expected outcome, reported on the DTO
        rather than raised.
        """
        product = self._product_repo.get(product_name)
        if product is None:
            logger.info("Order rejected, no product named %r", product_name)
            return OrderPlacementDTO(product_name=product_name, found=False)

        price = product.compute_price()
        final_price = self._discount.apply_discount(price)
        logger.debug(
            "Priced %r: %s -> %s with %s",
            product.name,
            price,
            final_price,
            type(self._discount).__name__,
        )
        return OrderPlacementDTO(
            product_name=product.name,
            found=True,
            final_price=final_price.plain(),
        )
