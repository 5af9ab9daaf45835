"""
Customers and the discount calculator built on top of them
"""

from dataclasses import dataclass
from typing import Any, Optional

from .engine import DiscountEngine, DiscountResult, _default_engine
from .formatter import MoneyFormatter
from .money import Amount, Money


@dataclass(frozen=True)
class Customer:
    """
    A named customer and the tier they belong to

    Attributes:
        name: display name used in summaries
        tier: CustomerTier, or any other value for customers without a discount
    """
    name: str
    tier: Any = None

    def discount_for(self, total: Amount, engine: Optional[DiscountEngine] = None) -> Money:
        """Discount this customer earns on a total"""
        return (engine or _default_engine).compute_discount(total, self.tier)

    def formatted_total(self, total: Amount, formatter: Optional[MoneyFormatter] = None) -> str:
        """Summary of what this customer pays on a total"""
        discount = self.discount_for(total)
        return (formatter or MoneyFormatter()).format_total(self.name, total, discount)


class DiscountCalculator:
    """
    Computes and summarizes the discount on one purchase
    """

    def __init__(
        self,
        total: Amount,
        customer: Customer,
        engine: Optional[DiscountEngine] = None,
        formatter: Optional[MoneyFormatter] = None
    ):
        self.total = Money(total)
        self.customer = customer
        self.engine = engine or _default_engine
        self.formatter = formatter or MoneyFormatter()

    @classmethod
    def for_customer(cls, customer_name: str, tier: Any, total: Amount, **kwargs) -> "DiscountCalculator":
        """Build a calculator straight from a name, tier and total"""
        return cls(total, Customer(customer_name, tier), **kwargs)

    @property
    def result(self) -> DiscountResult:
        return self.engine.apply_discount(self.total, self.customer.tier)

    @property
    def discount(self) -> Money:
        return self.result.discount

    @property
    def discounted_total(self) -> Money:
        return self.result.discounted_total

    @property
    def formatted_total(self) -> str:
        return self.formatter.format_total(self.customer.name, self.total, self.discount)

    @staticmethod
    def format_tax_amount(tax: Amount) -> str:
        return MoneyFormatter().format_tax(tax)
