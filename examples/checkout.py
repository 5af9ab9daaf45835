"""
Checkout example - discount summaries for a few customers
"""

from tierdiscount import (
    Customer,
    CustomerTier,
    DiscountCalculator,
    MoneyFormatter,
    configure_logging,
)


def main():
    configure_logging(verbose=True)
    formatter = MoneyFormatter()

    purchases = [
        (Customer("Alice", CustomerTier.STANDARD), "100.00"),
        (Customer("Bob", CustomerTier.CARD_HOLDER), "100.00"),
        (Customer("Carol", CustomerTier.GOLD), "200.00"),
        (Customer("Dave", "Platinum"), "50.00"),
    ]

    for customer, total in purchases:
        calculator = DiscountCalculator(total, customer, formatter=formatter)
        print(calculator.formatted_total)
        formatter.print_receipt(customer.name, calculator.total, calculator.discount, customer.tier)

    print(DiscountCalculator.format_tax_amount("25.00"))


if __name__ == "__main__":
    main()
