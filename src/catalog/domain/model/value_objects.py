"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from catalog.domain.exceptions import ValidationError

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


def _to_decimal(value: object) -> Decimal:
    """Coerce *value* to a finite Decimal, or raise ValueError."""
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a number")
    try:
        number = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"{value!r} is not a number") from exc
    if not number.is_finite():
        raise ValueError(f"{value!r} is not a finite number")
    return number


def _to_cents(amount: Decimal) -> Decimal:
    # Enough precision for every integer digit plus two places of cents.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount, always held to two decimal places.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in price calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite() or self.amount < Decimal("0"):
            raise ValidationError("Invalid price (must be >= 0).")
        object.__setattr__(self, "amount", _to_cents(self.amount))

    def discounted(self, percent: DiscountPercent) -> Money:
        """Return the amount reduced by *percent*, rounded to cents."""
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.amount.adjusted() + 8)
            discounted = self.amount * (HUNDRED - percent.value) / HUNDRED
        return Money(discounted)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: object) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(_to_decimal(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError("Invalid price (must be >= 0).") from exc


@dataclass(frozen=True)
class DiscountPercent:
    """A percentage in the closed range 0..100."""

    value: Decimal

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, Decimal)
            or not self.value.is_finite()
            or not Decimal("0") <= self.value <= HUNDRED
        ):
            raise ValidationError("Discount percent must be between 0 and 100.")

    def __str__(self) -> str:
        return f"{self.value}%"

    @staticmethod
    def of(value: object) -> DiscountPercent:
        try:
            return DiscountPercent(_to_decimal(value))
        except ValueError as exc:
            raise ValidationError(
                "Discount percent must be between 0 and 100."
            ) from exc
