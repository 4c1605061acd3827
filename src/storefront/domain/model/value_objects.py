"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError


def new_id() -> str:
    """Return a fresh random identifier (UUID4, canonical string form)."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Price:
    """Non-negative product price.

    Uses Decimal so that prices read back from storage compare equal to
    the ones written.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite number, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(f"Price cannot be negative, got {self.amount}")

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Price:
        """Coerce user input to a Price.

        Floats go through ``str()`` first so 0.1 stays 0.1 instead of
        its binary expansion.
        """
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid price: {amount!r}")
        try:
            return Price(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc
