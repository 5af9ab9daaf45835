"""
Discount computation engine
"""

import logging
from decimal import Decimal
from typing import Any, Dict, NamedTuple, Optional

from .exceptions import DiscountError
from .money import Amount, Money
from .tiers import TIER_RATES, CustomerTier, rate_for

logger = logging.getLogger(__name__)


class DiscountResult(NamedTuple):
    """Discount amount together with the total left to pay"""
    discount: Money
    discounted_total: Money


class DiscountEngine:
    """
    Applies tier discount rates to monetary totals.
    Stateless once built, safe to share between callers
    """

    def __init__(self, rates: Optional[Dict[CustomerTier, Decimal]] = None):
        """
        Initialize the engine
        rates: custom tier to rate table (uses the standard table if None)
        """
        if rates is None:
            self.rates = dict(TIER_RATES)
        else:
            self.rates = self._validate_rates(rates)

    @staticmethod
    def _validate_rates(rates: Dict[CustomerTier, Any]) -> Dict[CustomerTier, Decimal]:
        validated = {}
        for tier, rate in rates.items():
            if not isinstance(tier, CustomerTier):
                raise DiscountError(f"Unknown tier in rate table: {tier!r}")
            try:
                value = Decimal(str(rate))
            except Exception as e:
                raise DiscountError(f"Invalid rate for {tier.name}: {rate!r}") from e
            if not value.is_finite() or value < 0 or value > 1:
                raise DiscountError(f"Rate for {tier.name} must be between 0 and 1, got {rate!r}")
            validated[tier] = value
        return validated

    def compute_discount(self, total: Amount, tier: Any) -> Money:
        """
        Compute the discount a tier earns on a total
        Unrecognized tiers earn nothing
        """
        total = Money(total)
        rate = rate_for(tier, self.rates)
        discount = total.percentage(rate)
        logger.debug(f"Discount for tier {tier!r} at rate {rate} on {total.amount}: {discount.amount}")
        return discount

    def apply_discount(self, total: Amount, tier: Any) -> DiscountResult:
        """
        Compute the discount and the discounted total in one go
        """
        total = Money(total)
        discount = self.compute_discount(total, tier)
        return DiscountResult(discount=discount, discounted_total=total.subtract(discount))


_default_engine = DiscountEngine()


def compute_discount(total: Amount, tier: Any) -> Money:
    """Compute a discount with the standard tier table"""
    return _default_engine.compute_discount(total, tier)


def apply_discount(total: Amount, tier: Any) -> DiscountResult:
    """Compute discount and discounted total with the standard tier table"""
    return _default_engine.apply_discount(total, tier)
