"""
Money value object for monetary amounts carried by order payloads.

Amounts are integers in the smallest denomination of the currency
(cents for USD), exactly as they travel on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Money:
    """
    Immutable value object representing a monetary amount with currency.

    Both fields are optional and stored verbatim. `Money` fields can be
    signed or unsigned; the sign is meaningful to the enclosing object,
    not to this value.

    Attributes:
        amount: Amount in the smallest currency unit (e.g. 100 = $1.00)
        currency: ISO 4217 currency code (e.g. "USD")

    Example:
        >>> price = Money(amount=1250, currency="USD")
        >>> price.to_builder().amount(900).build()
        Money(amount=900, currency='USD')
    """

    amount: int | None = None
    currency: str | None = None

    def __str__(self) -> str:
        """String representation of Money."""
        return f"{self.currency or '???'} {self.amount if self.amount is not None else '-'}"

    @property
    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        """Check if amount is positive."""
        return self.amount is not None and self.amount > 0

    @classmethod
    def zero(cls, currency: str = "USD") -> "Money":
        """Create a zero Money object."""
        return cls(amount=0, currency=currency)

    @classmethod
    def builder(cls) -> "MoneyBuilder":
        """Return an empty builder."""
        return MoneyBuilder()

    def to_builder(self) -> "MoneyBuilder":
        """Return a builder seeded with this object's values."""
        return MoneyBuilder().amount(self.amount).currency(self.currency)


class MoneyBuilder:
    """Mutable accumulator for `Money`. Not thread-safe."""

    def __init__(self) -> None:
        self._amount: int | None = None
        self._currency: str | None = None

    def amount(self, value: int | None) -> "MoneyBuilder":
        self._amount = value
        return self

    def currency(self, value: str | None) -> "MoneyBuilder":
        self._currency = value
        return self

    def build(self) -> Money:
        return Money(amount=self._amount, currency=self._currency)
