"""Currency formatting for statements (US dollars, fixed locale)."""

from decimal import Decimal

from django.utils import numberformat

CURRENCY_SYMBOL = "$"


def usd(amount: int, divisor: int = 100) -> str:
    """Format an amount in cents as US dollars, e.g. 173000 -> "$1,730.00"."""
    value = Decimal(amount) / Decimal(divisor)
    formatted = numberformat.format(
        abs(value),
        decimal_sep=".",
        decimal_pos=2,
        grouping=3,
        thousand_sep=",",
        force_grouping=True,
        use_l10n=False,
    )
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{formatted}"
