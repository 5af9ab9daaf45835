"""
Exact-decimal money value type
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from .exceptions import MoneyError

Amount = Union["Money", Decimal, int, float, str]


def to_decimal(value: Amount) -> Decimal:
    """
    Convert a raw amount to Decimal without going through binary floating point.
    Floats are converted via their shortest repr, so 12.5 becomes Decimal("12.5")
    """
    if isinstance(value, Money):
        return value.amount
    if isinstance(value, bool):
        raise MoneyError(f"Not a monetary amount: {value!r}")

    try:
        if isinstance(value, float):
            result = Decimal(repr(value))
        elif isinstance(value, (Decimal, int, str)):
            result = Decimal(value)
        else:
            raise MoneyError(f"Not a monetary amount: {value!r}")
    except InvalidOperation as e:
        raise MoneyError(f"Not a monetary amount: {value!r}") from e

    if not result.is_finite():
        raise MoneyError(f"Amount must be finite: {value!r}")
    return result


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable monetary amount

    Attributes:
        amount: exact decimal value, never rounded by arithmetic
    """
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, "amount", to_decimal(self.amount))

    @classmethod
    def zero(cls) -> "Money":
        return cls(Decimal("0"))

    def subtract(self, other: Amount) -> "Money":
        """Return a new Money holding this amount minus other"""
        return Money(self.amount - to_decimal(other))

    def __sub__(self, other: Amount) -> "Money":
        if not isinstance(other, (Money, Decimal, int, float, str)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Amount) -> "Money":
        if not isinstance(other, (Decimal, int, float, str)):
            return NotImplemented
        return Money(other).subtract(self)

    def percentage(self, rate: Amount) -> "Money":
        """
        Scale this amount by a fraction in [0, 1]
        Returns a new Money, e.g. Money("200").percentage("0.25") == Money("50")
        """
        fraction = to_decimal(rate)
        if fraction < 0 or fraction > 1:
            raise MoneyError(f"Rate must be between 0 and 1, got {fraction}")
        return Money(self.amount * fraction)

    def is_negative(self) -> bool:
        return self.amount < 0

    def to_tax_string(self) -> str:
        """Render this amount as a tax summary line"""
        from .formatter import format_tax
        return format_tax(self)

    def __str__(self) -> str:
        from .formatter import format_money
        return format_money(self)
