"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    localcontext,
)
from typing import Iterable, Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

Number = Union[str, int, float, Decimal]

# Sums and products of exact operands stay exact: quantities have no upper bound
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.
    
    Args:
        value: Value to convert (str, int, float, Decimal, or None)
        
    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")
    
    if isinstance(value, Decimal):
        return value
    
    try:
        # Go through str so 99.99 stays 99.99 and not its binary neighbour
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_price(value: Number) -> Decimal:
    """
    Strict Decimal conversion for configured prices.

    Unlike ``to_decimal`` this never falls back to zero: a malformed value
    raises ``ValueError``.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, ValueError, TypeError):
            raise ValueError(f"Invalid price: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    return result


def round_money(value: Number) -> Decimal:
    """Round monetary value to cent precision (ROUND_HALF_UP)."""
    with localcontext(EXACT_CONTEXT):
        return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_amount(value: Number) -> str:
    """Format a value with exactly two decimals and no symbol, e.g. ``249.97``."""
    return f"{round_money(value):.2f}"


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.
    
    Args:
        value: Value to format
        currency: Currency code (USD, EUR, GBP or any other code)
        
    Returns:
        Formatted string with currency symbol, e.g. ``$249.97`` or ``249.97 CHF``
    """
    symbol = CURRENCY_SYMBOLS.get(currency)
    formatted = format_amount(value)
    if symbol:
        return f"{symbol}{formatted}"
    return f"{formatted} {currency}"


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    with localcontext(EXACT_CONTEXT):
        return to_decimal(value) * to_decimal(factor)


def sum_money(values: Iterable[Number]) -> Decimal:
    """Exact sum of monetary values (Decimal("0") when empty)."""
    with localcontext(EXACT_CONTEXT):
        return sum((to_decimal(v) for v in values), Decimal("0"))


def is_positive(value: Number) -> bool:
    return to_decimal(value) > 0
