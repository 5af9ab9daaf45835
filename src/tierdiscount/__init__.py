__version__ = "0.1.0"

# Package metadata
__description__ = "Tier-based customer discounts with exact decimal money"

# Public API
from .money import Money
from .tiers import CustomerTier, TIER_RATES, rate_for
from .engine import DiscountEngine, DiscountResult, compute_discount, apply_discount
from .formatter import MoneyFormatter, format_money, format_total, format_tax
from .customer import Customer, DiscountCalculator
from .config import Settings, get_settings, configure_logging
from .exceptions import (
    TierDiscountError,
    MoneyError,
    DiscountError,
    FormattingError,
    ConfigurationError
)

__all__ = [
    # Version
    "__version__",

    # Main classes
    "DiscountEngine",
    "DiscountCalculator",
    "MoneyFormatter",

    # Functions
    "compute_discount",
    "apply_discount",
    "rate_for",
    "format_money",
    "format_total",
    "format_tax",

    # Data classes
    "Money",
    "Customer",
    "CustomerTier",
    "DiscountResult",
    "TIER_RATES",

    # Settings
    "Settings",
    "get_settings",
    "configure_logging",

    # Exceptions
    "TierDiscountError",
    "MoneyError",
    "DiscountError",
    "FormattingError",
    "ConfigurationError"
]
