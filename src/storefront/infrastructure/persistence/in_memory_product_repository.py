"""Dict-backed implementation of ProductRepository."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.add(p)

    def add(self, product: Product) -> None:
        self._store[product.name] = product

    def get(self, name: str) -> Product | None:
        return self._store.get(name)

    def list_all(self) -> list[Product]:
        return list(self._store.values())
