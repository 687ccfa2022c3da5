"""User aggregate: owns an ordered collection of products.

Products created through ``add_product`` are stamped with the user's
name as owner. Copying them into a repository does not remove them
from the user.
"""

from __future__ import annotations

import logging
from enum import Enum

from catalog.domain.exceptions import NotFoundError, ValidationError
from catalog.domain.model.product import Clock, Product

logger = logging.getLogger(__name__)


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


class User:

    def __init__(
        self,
        name: str,
        email: str,
        role: Role = Role.USER,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._name = name
        self._email = email
        try:
            self._role = Role(role)
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {role!r}") from exc
        self._clock = clock
        self._products: list[Product] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def role(self) -> Role:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role is Role.ADMIN

    # --- Product CRUD ---------------------------------------------------------

    def add_product(self, name: str, price: object) -> Product:
        """Create a product owned by this user and append it."""
        product = Product(name=name, price=price, owner=self._name, clock=self._clock)
        self._products.append(product)
        logger.debug("User %s added product %s", self._name, product.id)
        return product

    def list_products(self) -> list[Product]:
        """Return a copy; mutating it does not touch the user's collection."""
        return list(self._products)

    def find_products_by_name(self, query: object) -> list[Product]:
        term = str(query).lower()
        return [p for p in self._products if term in p.name.lower()]

    def update_product_price(self, product_id: str, new_price: object) -> Product:
        product = self._products[self._index_of(product_id)]
        product.price = new_price
        return product

    def delete_product(self, product_id: str) -> Product:
        deleted = self._products.pop(self._index_of(product_id))
        logger.debug("User %s removed product %s", self._name, product_id)
        return deleted

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise NotFoundError(f"Product '{product_id}' not found for user {self._name}")

    def __repr__(self) -> str:
        return f"User(name={self._name!r}, email={self._email!r}, role={self._role.value!r})"
