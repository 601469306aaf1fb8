"""Abstract repository for products.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Store a product under its name, replacing any previous entry."""

    @abstractmethod
    def get(self, name: str) -> Product | None:
        """Return the product stored under *name*, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""
