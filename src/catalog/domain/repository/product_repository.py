"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Store a product, replacing any existing one with the same ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_all(self) -> list[Product]:
        """Return every stored product in insertion order."""

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Replace an existing product; raise NotFoundError if its ID is unknown."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Return False if it was not stored."""

    @abstractmethod
    def find_by_name_like(self, query: object) -> list[Product]:
        """Return products whose name contains *query*, ignoring case."""
