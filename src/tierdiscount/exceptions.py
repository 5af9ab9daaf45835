"""
Custom exceptions
"""


class TierDiscountError(Exception):
    """Base exception"""
    pass


class MoneyError(TierDiscountError):
    """Invalid monetary amounts or rates"""
    pass


class DiscountError(TierDiscountError):
    """Issues computing discounts"""
    pass


class FormattingError(TierDiscountError):
    """Issues formatting output"""
    pass


class ConfigurationError(TierDiscountError):
    """Invalid settings"""
    pass
