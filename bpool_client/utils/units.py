"""Exact conversion between human-readable amounts and token base units"""

from decimal import Decimal, InvalidOperation, ROUND_DOWN, localcontext

from ..core.exceptions import ConversionError

# Enough digits for any uint256 value scaled by any realistic decimals count
PRECISION = 100


def _to_decimal(amount):
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        # str() gives the shortest repr, avoiding binary float noise
        amount = str(amount)
    try:
        return Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise ConversionError(f"Invalid amount: {amount!r}")


def format_amount(value):
    """Render a Decimal as a plain, normalised decimal string ("1.5", "0", "100")"""
    if value == 0:
        return "0"
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return format(value.normalize(), "f")


def to_base_units(amount, decimals=18):
    """
    Convert a human amount to integer base units.

    Digits finer than 10**-decimals are truncated toward zero. Negative
    amounts are rejected.

    Args:
        amount: str, int, float or Decimal in human units
        decimals: token decimals

    Returns:
        int base units
    """
    value = _to_decimal(amount)
    if not value.is_finite():
        raise ConversionError(f"Invalid amount: {amount!r}")
    if value < 0:
        raise ConversionError(f"Negative amount: {amount!r}")
    with localcontext() as ctx:
        ctx.prec = PRECISION
        scaled = value.scaleb(int(decimals))
        return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def from_base_units(units, decimals=18):
    """Convert integer base units to a human amount string"""
    try:
        units = int(units)
    except (TypeError, ValueError):
        raise ConversionError(f"Invalid base units: {units!r}")
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return format_amount(Decimal(units).scaleb(-int(decimals)))


def rescale(value, exponent):
    """Exact value * 10**exponent, as a Decimal"""
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return _to_decimal(value).scaleb(int(exponent))
