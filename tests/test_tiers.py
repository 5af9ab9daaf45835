"""
Tests for customer tiers and the rate table
"""

import logging
from decimal import Decimal

from tierdiscount.tiers import CustomerTier, TIER_RATES, NO_DISCOUNT, rate_for


class TestCustomerTier:
    """Test cases for CustomerTier enum"""

    def test_rates(self):
        """Test the rate attached to each tier"""
        assert CustomerTier.STANDARD.rate == Decimal("0.05")
        assert CustomerTier.CARD_HOLDER.rate == Decimal("0.10")
        assert CustomerTier.GOLD.rate == Decimal("0.25")

    def test_every_tier_has_a_rate(self):
        """Test the table covers all tiers with rates in [0, 1]"""
        for tier in CustomerTier:
            assert tier in TIER_RATES
            assert Decimal("0") <= TIER_RATES[tier] <= Decimal("1")

    def test_parse_spellings(self):
        """Test parsing values, names and CamelCase spellings"""
        assert CustomerTier.parse("gold") is CustomerTier.GOLD
        assert CustomerTier.parse("GOLD") is CustomerTier.GOLD
        assert CustomerTier.parse("CardHolder") is CustomerTier.CARD_HOLDER
        assert CustomerTier.parse("card_holder") is CustomerTier.CARD_HOLDER
        assert CustomerTier.parse("card holder") is CustomerTier.CARD_HOLDER
        assert CustomerTier.parse(" Standard ") is CustomerTier.STANDARD
        assert CustomerTier.parse(CustomerTier.GOLD) is CustomerTier.GOLD

    def test_parse_unknown(self):
        """Test unknown values resolve to None"""
        assert CustomerTier.parse("platinum") is None
        assert CustomerTier.parse(None) is None
        assert CustomerTier.parse(3) is None

    def test_parse_unknown_is_logged(self, caplog):
        """Test unrecognized tiers are logged at debug level"""
        with caplog.at_level(logging.DEBUG, logger="tierdiscount.tiers"):
            CustomerTier.parse("platinum")
        assert "Unrecognized customer tier" in caplog.text


class TestRateFor:
    """Test cases for rate_for"""

    def test_known_tiers(self):
        """Test lookups for each tier"""
        for tier, rate in TIER_RATES.items():
            assert rate_for(tier) == rate

    def test_unrecognized_tier_gets_zero(self):
        """Test silent fallback to a zero rate"""
        assert rate_for("Unknown") == NO_DISCOUNT
        assert rate_for(None) == Decimal("0")
        assert rate_for(object()) == Decimal("0")

    def test_custom_table(self):
        """Test lookups against a custom table"""
        rates = {CustomerTier.GOLD: Decimal("0.5")}
        assert rate_for(CustomerTier.GOLD, rates) == Decimal("0.5")
        assert rate_for(CustomerTier.STANDARD, rates) == Decimal("0")
