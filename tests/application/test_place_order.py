"""Integration tests for the PlaceOrder use case.

Uses in-memory fakes — nothing is printed.
"""

from storefront.application.dto import PRODUCT_NOT_FOUND_MESSAGE
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.factory.product_factory import ProductFactory
from storefront.domain.service.discount import (
    DiscountStrategy,
    NoDiscountStrategy,
    PercentageOffStrategy,
)
from tests.fakes import FakeProductRepository, FlatOffStrategy


def _setup(
    discount: DiscountStrategy | None = None,
) -> tuple[PlaceOrderHandler, FakeProductRepository]:
    repo = FakeProductRepository([
        ProductFactory.create_product("Laptop", "1000.00", gift_wrap=True),
        ProductFactory.create_product("Mouse", "25.00"),
    ])
    handler = PlaceOrderHandler(repo, discount or PercentageOffStrategy())
    return handler, repo


class TestPlaceOrderHappyPath:

    def test_gift_wrapped_laptop_twenty_percent_off(self):
        handler, _ = _setup()
        dto = handler.handle("Laptop")
        assert dto.found
        assert dto.final_price == "804.00"
        assert dto.message == "Order placed for Laptop with final price 804.00"

    def test_no_discount(self):
        handler, _ = _setup(NoDiscountStrategy())
        assert handler.handle("Mouse").final_price == "25.00"

    def test_new_strategy_plugs_in(self):
        handler, _ = _setup(FlatOffStrategy("5.00"))
        assert handler.handle("Mouse").final_price == "20.00"

    def test_looks_up_through_repository(self):
        handler, repo = _setup()
        handler.handle("Mouse")
        assert repo.lookups == ["Mouse"]


class TestPlaceOrderNotFound:

    def test_missing_product_reports_not_found(self):
        handler, _ = _setup()
        dto = handler.handle("Phone")
        assert not dto.found
        assert dto.final_price is None
        assert dto.message == PRODUCT_NOT_FOUND_MESSAGE == "Product not found."

    def test_lookup_is_case_sensitive(self):
        handler, _ = _setup()
        assert not handler.handle("laptop").found
