"""
Whole-unit rounding and currency display.

All money shown to players is a whole number of rupees. Rounding is
half-up (half away from zero) on the exact value — 2.5 -> 3, 33.33 -> 33.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from fractions import Fraction

from .config import settings as default_settings

GROUPING_STYLES = ("indian", "western")


def round_half_up(value) -> int:
    """Round to the nearest integer, ties away from zero."""
    if isinstance(value, int):
        return value
    exact = Decimal(value)
    with localcontext() as ctx:
        # Enough digits for the whole integer part, however large
        ctx.prec = max(28, exact.adjusted() + 3)
        return int(exact.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_half_up_ratio(numerator, denominator: int) -> int:
    """
    Round numerator / denominator half-up without dividing in floating point.
    numerator may be an int or a float; denominator must be positive.
    """
    ratio = Fraction(numerator) / denominator
    whole, remainder = divmod(ratio.numerator, ratio.denominator)
    if 2 * remainder >= ratio.denominator:
        whole += 1
    return whole


def group_digits(amount: int, style: str = "indian") -> str:
    """
    Insert thousands separators into a whole number.

    indian:  1234567 -> "12,34,567" (last three digits, then pairs)
    western: 1234567 -> "1,234,567"
    """
    if style not in GROUPING_STYLES:
        raise ValueError(
            f"Unknown digit grouping: {style}. Available: {list(GROUPING_STYLES)}"
        )

    sign = "-" if amount < 0 else ""
    digits = str(abs(int(amount)))

    if style == "western" or len(digits) <= 3:
        return sign + f"{int(digits):,}"

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_currency(amount, settings=None) -> str:
    """Render an amount as e.g. '₹1,00,000' — symbol prefix, no decimals."""
    settings = settings or default_settings
    whole = round_half_up(amount)
    grouped = group_digits(whole, settings.DIGIT_GROUPING)
    if grouped.startswith("-"):
        return f"-{settings.CURRENCY_SYMBOL}{grouped[1:]}"
    return f"{settings.CURRENCY_SYMBOL}{grouped}"
