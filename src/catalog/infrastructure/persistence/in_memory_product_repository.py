"""Dict-backed implementation of ProductRepository."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import NotFoundError, TypeMismatchError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.create(p)

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        self._require_product(product)
        if product.id in self._store:
            logger.debug("Overwriting product %s", product.id)
        self._store[product.id] = product
        return product

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_all(self) -> list[Product]:
        return list(self._store.values())

    def update(self, product: Product) -> Product:
        self._require_product(product)
        if product.id not in self._store:
            raise NotFoundError(f"Product with ID '{product.id}' not found")
        self._store[product.id] = product
        return product

    def delete(self, product_id: str) -> bool:
        removed = self._store.pop(product_id, None)
        if removed is None:
            return False
        logger.debug("Deleted product %s", product_id)
        return True

    def find_by_name_like(self, query: object) -> list[Product]:
        term = str(query).lower()
        return [p for p in self._store.values() if term in p.name.lower()]

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _require_product(product: object) -> None:
        if not isinstance(product, Product):
            raise TypeMismatchError(
                f"Expected Product instance, got {type(product).__name__}"
            )

    def __len__(self) -> int:
        return len(self._store)
