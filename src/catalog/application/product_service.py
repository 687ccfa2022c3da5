"""Application service: product catalog use cases.

A thin façade over a ProductRepository. It owns no data; every read goes
to the repository and every mutation is written back through ``update``.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Clock, Product
from catalog.domain.model.user import User
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, product_repo: ProductRepository, clock: Clock | None = None) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def add_new_product(self, name: str, price: object, owner: str | None = None) -> Product:
        """Create a product and store it."""
        product = Product(name=name, price=price, owner=owner, clock=self._clock)
        self._product_repo.create(product)
        logger.info("Added product %s '%s' at %s", product.id, product.name, product.price)
        return product

    def list_all(self) -> list[Product]:
        return self._product_repo.get_all()

    def search(self, term: object) -> list[Product]:
        return self._product_repo.find_by_name_like(term)

    def change_price(self, product_id: str, new_price: object) -> Product:
        product = self._get_existing(product_id)
        product.price = new_price
        self._product_repo.update(product)
        logger.info("Product %s price changed to %s", product_id, product.price)
        return product

    def discount(self, product_id: str, percent: object) -> Product:
        """Apply a percentage discount and persist the new price."""
        product = self._get_existing(product_id)
        product.apply_discount(percent)
        self._product_repo.update(product)
        logger.info(
            "Applied %s%% discount to product %s, now %s",
            percent, product_id, product.price,
        )
        return product

    def remove(self, product_id: str) -> bool:
        if not self._product_repo.delete(product_id):
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        logger.info("Removed product %s", product_id)
        return True

    def import_from_user(self, user: User) -> list[Product]:
        """Copy every product a user owns into the repository.

        The user keeps its products; repository and user share the same
        instances afterwards.
        """
        imported = [self._product_repo.create(p) for p in user.list_products()]
        logger.info("Imported %d products from user %s", len(imported), user.name)
        return imported

    # --- Internal helpers -----------------------------------------------------

    def _get_existing(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return product
