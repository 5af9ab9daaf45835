"""
Customer tiers and the discount rate each one earns
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

NO_DISCOUNT = Decimal("0")


class CustomerTier(Enum):
    """Customer classifications that earn a discount"""
    STANDARD = "standard"
    CARD_HOLDER = "card_holder"
    GOLD = "gold"

    @property
    def rate(self) -> Decimal:
        """Discount rate for this tier"""
        return TIER_RATES[self]

    @classmethod
    def parse(cls, value: Any) -> Optional["CustomerTier"]:
        """
        Resolve a tier from a member, its value, its name or the CamelCase
        spelling ("CardHolder"). Case-insensitive.
        Returns None when nothing matches
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            logger.debug(f"Unrecognized customer tier: {value!r}")
            return None

        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        for tier in cls:
            if key in (tier.value, tier.name.lower(), tier.value.replace("_", "")):
                return tier

        logger.debug(f"Unrecognized customer tier: {value!r}")
        return None


TIER_RATES: Dict[CustomerTier, Decimal] = {
    CustomerTier.STANDARD: Decimal("0.05"),
    CustomerTier.CARD_HOLDER: Decimal("0.10"),
    CustomerTier.GOLD: Decimal("0.25"),
}


def rate_for(tier: Any, rates: Optional[Dict[CustomerTier, Decimal]] = None) -> Decimal:
    """
    Look up the discount rate for a tier
    Anything that is not a known tier gets a zero rate, this never raises
    """
    table = TIER_RATES if rates is None else rates
    resolved = CustomerTier.parse(tier)
    if resolved is None:
        return NO_DISCOUNT
    return table.get(resolved, NO_DISCOUNT)
