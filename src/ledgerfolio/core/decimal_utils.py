"""Exact decimal helpers for ledger amounts."""

from decimal import Context, Decimal, InvalidOperation, localcontext
from typing import Iterable, Union

from ledgerfolio.core.exceptions import PrecisionError, ValidationError

# Column precision for every stored amount: NUMERIC(100, 20).
MAX_DIGITS = 100
MAX_SCALE = 20

ZERO = Decimal("0")

# Wide enough that no ledger arithmetic is ever rounded.
LEDGER_CONTEXT = Context(prec=MAX_DIGITS + MAX_SCALE)

DecimalLike = Union[Decimal, str, int]


def to_decimal(value: DecimalLike, field: str = "amount") -> Decimal:
    """
    Convert a value to Decimal without going through binary floating point.

    Floats are refused outright; use strings for user input.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or isinstance(value, float):
        raise ValidationError(f"{field} must be a decimal string, not {type(value).__name__}", field=field)
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"{field} is not a valid number: {value!r}", field=field)
    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number", field=field)
    return result


def decimal_places(value: Decimal) -> int:
    """Return the number of significant fractional digits (trailing zeros ignored)."""
    if value == ZERO:
        return 0
    exponent = value.normalize(LEDGER_CONTEXT).as_tuple().exponent
    return max(0, -exponent)


def check_precision(value: Decimal, precision: int, field: str = "amount") -> Decimal:
    """
    Reject values with more fractional digits than ``precision``.

    Returns the value quantized to exactly ``precision`` places so the
    stored string is canonical ("100" with precision 2 becomes "100.00").
    """
    if decimal_places(value) > precision:
        raise PrecisionError(field, str(value), precision)
    check_storable(value, field)
    return value.quantize(Decimal(1).scaleb(-precision), context=LEDGER_CONTEXT)


def ledger_context():
    """Context manager for exact ledger arithmetic."""
    return localcontext(LEDGER_CONTEXT)


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum Decimals without context rounding."""
    with ledger_context():
        return sum(values, ZERO)


def check_storable(value: Decimal, field: str = "amount") -> Decimal:
    """Ensure a value fits the NUMERIC(100, 20) column."""
    places = decimal_places(value)
    if places > MAX_SCALE:
        raise PrecisionError(field, str(value), MAX_SCALE)
    integer_digits = max(value.adjusted() + 1, 1)
    if integer_digits + MAX_SCALE > MAX_DIGITS:
        raise ValidationError(f"{field} is too large", field=field)
    return value


def format_decimal(value: Decimal) -> str:
    """Render a Decimal as a plain string without exponent notation."""
    return format(value, "f")
