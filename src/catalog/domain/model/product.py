"""Product aggregate.

Products live independently of users and repositories. A user creates
them, a repository may hold the very same instances, and their name and
price change only through the validating setters below.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import DiscountPercent, Money

Clock = Callable[[], datetime]

DEFAULT_OWNER = "unknown"
MIN_NAME_LENGTH = 2


def generate_product_id() -> str:
    """Return a fresh product id (``p_`` + 32 hex chars of a UUID4)."""
    return "p_" + uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Product:
    """A product in the catalog.

    ``id`` and ``created_at`` are fixed at construction. ``name`` and
    ``price`` are properties whose setters validate before writing, so a
    rejected value never leaves the product half-updated.
    """

    def __init__(
        self,
        name: str,
        price: object,
        *,
        id: str | None = None,
        owner: str | None = None,
        created_at: datetime | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._id = id if id is not None else generate_product_id()
        self.name = name
        self.price = price
        self._owner = owner if owner is not None else DEFAULT_OWNER
        if created_at is None:
            created_at = (clock or utc_now)()
        self._created_at = _as_utc(created_at)

    # --- Read-only identity ---------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # --- Validated attributes -------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not isinstance(value, str) or len(value.strip()) < MIN_NAME_LENGTH:
            raise ValidationError(
                f"Invalid product name ({MIN_NAME_LENGTH}+ chars required)."
            )
        self._name = value.strip()

    @property
    def price(self) -> Decimal:
        return self._price.amount

    @price.setter
    def price(self, value: object) -> None:
        self._price = Money.of(value)

    # --- Behaviour ------------------------------------------------------------

    def apply_discount(self, percent: object) -> Decimal:
        """Reduce the price by *percent* (0-100) and return the new price."""
        self._price = self._price.discounted(DiscountPercent.of(percent))
        return self.price

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Plain record form used for interchange."""
        return {
            "id": self._id,
            "name": self._name,
            "price": float(self.price),
            "owner": self._owner,
            "createdAt": _format_timestamp(self._created_at),
        }

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> Product:
        """Rebuild a product from the record produced by ``to_dict()``."""
        created_at = record.get("createdAt")
        return cls(
            name=record.get("name"),  # type: ignore[arg-type]
            price=record.get("price"),
            id=record.get("id"),
            owner=record.get("owner"),
            created_at=_parse_timestamp(created_at) if created_at else None,
        )

    def __repr__(self) -> str:
        return f"Product(id={self._id!r}, name={self._name!r}, price={self.price!r})"


# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _format_timestamp(moment: datetime) -> str:
    # e.g. 2024-05-01T12:00:00.123Z
    iso = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return iso.replace("+00:00", "Z")


def _parse_timestamp(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValidationError(f"Invalid createdAt timestamp: {value!r}") from exc
