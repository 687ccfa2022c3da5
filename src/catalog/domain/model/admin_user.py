"""AdminUser: an admin account plus the capability to act on other users.

Rather than subclassing User, an AdminUser wraps a User whose role is
ADMIN. The admin's own products are managed through ``account``.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import TypeMismatchError, ValidationError
from catalog.domain.model.product import Clock, Product
from catalog.domain.model.user import Role, User

logger = logging.getLogger(__name__)


class AdminUser:

    def __init__(self, account: User) -> None:
        if not isinstance(account, User):
            raise TypeMismatchError("Admin account must be a User.")
        if not account.is_admin:
            raise ValidationError(
                f"User {account.name} does not have the admin role"
            )
        self._account = account

    @staticmethod
    def create(name: str, email: str, *, clock: Clock | None = None) -> AdminUser:
        """Build a fresh admin account and wrap it."""
        return AdminUser(User(name, email, Role.ADMIN, clock=clock))

    @property
    def account(self) -> User:
        return self._account

    @property
    def name(self) -> str:
        return self._account.name

    @property
    def email(self) -> str:
        return self._account.email

    @property
    def role(self) -> Role:
        return self._account.role

    def delete_product_from_user(self, target: User | AdminUser, product_id: str) -> Product:
        """Delete *product_id* from another user's collection.

        Raises TypeMismatchError if *target* is neither a User nor an
        AdminUser; NotFoundError from the target propagates unchanged.
        """
        if isinstance(target, AdminUser):
            target = target.account
        if not isinstance(target, User):
            raise TypeMismatchError(
                f"Target must be a User instance, got {type(target).__name__}"
            )
        deleted = target.delete_product(product_id)
        logger.info(
            "Admin %s deleted product %s from user %s",
            self.name, product_id, target.name,
        )
        return deleted

    def __repr__(self) -> str:
        return f"AdminUser(name={self.name!r}, email={self.email!r})"
