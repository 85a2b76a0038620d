from decimal import Decimal, ROUND_HALF_UP

TWO_DP = Decimal("0.01")
_HUNDRED = Decimal("100")


def to_decimal(value) -> Decimal:
    """Coerce ints, floats and strings to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    """Round to 2 dp, halves away from zero (0.125 → 0.13)."""
    return to_decimal(amount).quantize(TWO_DP, rounding=ROUND_HALF_UP)


def percent_of(amount: Decimal, percent) -> Decimal:
    return to_decimal(amount) * to_decimal(percent) / _HUNDRED
