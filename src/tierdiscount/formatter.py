"""
Currency formatting for discount and tax summaries
"""

from decimal import Decimal, localcontext
from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import Settings, get_settings
from .exceptions import FormattingError
from .money import Amount, Money
from .tiers import CustomerTier

CENT = Decimal("0.01")


class MoneyFormatter:
    """
    Formatter for monetary amounts and the summaries built from them
    """

    def __init__(self, settings: Optional[Settings] = None, console: Optional[Console] = None):
        """
        Initialize the formatter
        settings: formatting settings (read from the environment if None)
        console: Rich console used by print_receipt
        """
        self.settings = settings or get_settings()
        self._console = console

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console()
        return self._console

    def format_money(self, value: Amount) -> str:
        """
        Render an amount with the currency symbol and exactly two decimals,
        e.g. 1234.5 -> "$1,234.50" and -5 -> "-$5.00"
        """
        try:
            amount = Money(value).amount
            # Default context precision (28 digits) is too small for large amounts
            with localcontext() as ctx:
                ctx.prec = max(ctx.prec, amount.adjusted() + 3)
                amount = amount.quantize(CENT, rounding=self.settings.rounding)
            sign = "-" if amount < 0 else ""
            return f"{sign}{self.settings.currency_symbol}{abs(amount):,.2f}"
        except Exception as e:
            raise FormattingError(f"Failed to format amount {value!r}: {e}") from e

    def format_total(self, customer_name: str, total: Amount, discount: Amount) -> str:
        """
        Summarize what a customer pays after the discount
        """
        try:
            discounted_total = Money(total).subtract(discount)
        except Exception as e:
            raise FormattingError(f"Failed to format total: {e}") from e

        # No space before "with" unless a separator is configured
        return (
            f"Total for {customer_name} is {self.format_money(discounted_total)}"
            f"{self.settings.segment_separator}"
            f"with discount {self.format_money(discount)}"
        )

    def format_tax(self, amount: Amount) -> str:
        return f"Total tax is {self.format_money(amount)}"

    def format_receipt(
        self,
        customer_name: str,
        total: Amount,
        discount: Amount,
        tier: Any = None
    ) -> Panel:
        """
        Build a receipt panel with subtotal, discount and amount due
        Returns a Rich Panel
        """
        try:
            total = Money(total)
            discount = Money(discount)
            discounted_total = total.subtract(discount)
        except Exception as e:
            raise FormattingError(f"Failed to format receipt: {e}") from e

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(justify="right")

        resolved = CustomerTier.parse(tier)
        if resolved is not None:
            # Rate actually applied, whichever engine produced the discount
            rate = discount.amount / total.amount if total.amount else resolved.rate
            table.add_row("Tier", f"{resolved.name.replace('_', ' ').title()} ({rate:.0%})")
        table.add_row("Subtotal", self.format_money(total))
        table.add_row("Discount", Text(self.format_money(discount), style="green"))
        table.add_row("Total", Text(self.format_money(discounted_total), style="bold"))

        return Panel(
            table,
            title=f"[bold]{customer_name}[/bold]",
            border_style="blue"
        )

    def print_receipt(
        self,
        customer_name: str,
        total: Amount,
        discount: Amount,
        tier: Any = None
    ) -> None:
        self.console.print(self.format_receipt(customer_name, total, discount, tier))


def format_money(value: Amount) -> str:
    return MoneyFormatter().format_money(value)


def format_total(customer_name: str, total: Amount, discount: Amount) -> str:
    """Total summary using the process settings"""
    return MoneyFormatter().format_total(customer_name, total, discount)


def format_tax(amount: Amount) -> str:
    """Tax summary using the process settings"""
    return MoneyFormatter().format_tax(amount)
