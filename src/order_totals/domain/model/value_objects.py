"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from order_totals.domain.exceptions import ValidationError

ZERO = Decimal("0")


def to_decimal(raw: str | float | int | Decimal | None) -> Decimal | None:
    """Coerce *raw* to Decimal, passing None through."""
    if raw is None or isinstance(raw, Decimal):
        return raw
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid decimal value: {raw!r}")
    try:
        return Decimal(str(raw))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid decimal value: {raw!r}") from exc


@dataclass(frozen=True)
class MoneyAmount:
    """A numeric value tagged with its currency code.

    Unlike a price, a money amount may be negative: discounts are usually
    reported as negative figures.
    """

    value: Decimal
    currency: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Money value must be a Decimal, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return f"{self.value:.2f} {self.currency}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(value: str | float | int | Decimal | None, currency: str) -> MoneyAmount:
        """Build from a loosely typed value; an absent value means zero."""
        amount = to_decimal(value)
        return MoneyAmount(ZERO if amount is None else amount, currency)
