"""Pure functions for parsing and formatting currency amounts.

Amounts typed by the user are parsed with Decimal (never float) and rounded
to the nearest cent using ROUND_HALF_UP, i.e. halves round away from zero:
"1.005" becomes 1.01.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from acctmgr.domain.models import Money

CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Money:
    """Round a decimal amount to the nearest cent.

    Args:
        amount: Amount in currency units (e.g. Decimal("12.345")).

    Returns:
        Money amount in cents.
    """
    return Money(int(amount.quantize(CENT, rounding=ROUND_HALF_UP) * 100))


def from_cents(amount: Money) -> Decimal:
    """Convert cents back to a two-decimal amount."""
    return (Decimal(amount) / 100).quantize(CENT)


def parse_amount(raw: str) -> Money | None:
    """Parse a user-supplied amount string to cents.

    Args:
        raw: String containing an amount in currency units.

    Returns:
        Money amount in cents, or None if the string is not a finite,
        non-negative number.
    """
    text = raw.strip()
    # Decimal accepts "_" digit grouping; separators are not amounts
    if not text or "_" in text:
        return None

    try:
        value = Decimal(text)
        if not value.is_finite() or value < 0:
            return None
        return to_cents(value)
    except InvalidOperation:
        # Unparseable, or too many digits to quantize to cents
        return None


def format_money(amount: Money) -> str:
    """Format cents for display with exactly two decimals (e.g. "1050.00")."""
    return f"{from_cents(amount):.2f}"
