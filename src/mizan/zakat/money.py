"""Decimal helpers for monetary values.

Every amount entering the engine passes through ``to_decimal`` so that
binary floats never reach the arithmetic, and every amount leaving it as
a payable figure passes through ``round_money``.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from mizan.core.exceptions import InvalidInputError

# ISO 4217 currencies whose minor unit is not two digits
_MINOR_UNIT_EXCEPTIONS = {
    # no minor unit
    "BIF": 0,
    "CLP": 0,
    "DJF": 0,
    "GNF": 0,
    "ISK": 0,
    "JPY": 0,
    "KMF": 0,
    "KRW": 0,
    "PYG": 0,
    "RWF": 0,
    "UGX": 0,
    "VND": 0,
    "VUV": 0,
    "XAF": 0,
    "XOF": 0,
    "XPF": 0,
    # three-digit minor unit
    "BHD": 3,
    "IQD": 3,
    "JOD": 3,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "TND": 3,
}

ZERO = Decimal("0")

# Significant digits a single money operation may need
MAX_MONEY_DIGITS = 100


def to_decimal(value, name: str = "value") -> Decimal:
    """Coerce ``value`` to a finite Decimal.

    Floats go through ``str()`` so 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Raises:
        InvalidInputError: For booleans, unparseable strings, NaN or infinity.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidInputError(f"{name} is not a number: {value!r}") from e
    else:
        raise InvalidInputError(f"{name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return result


def minor_unit(currency: str) -> int:
    """Number of decimal places in the currency's minor unit."""
    return _MINOR_UNIT_EXCEPTIONS.get(currency.upper(), 2)


@contextmanager
def _precision(digits: int) -> Iterator[None]:
    """Raise the working precision to at least ``digits`` for the block."""
    if digits > MAX_MONEY_DIGITS:
        raise InvalidInputError(f"Amount needs {digits} significant digits; at most {MAX_MONEY_DIGITS} are supported")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        yield


def multiply(amount: Decimal, factor: Decimal) -> Decimal:
    """Exact product of two Decimals."""
    with _precision(len(amount.as_tuple().digits) + len(factor.as_tuple().digits)):
        return amount * factor


def round_money(amount: Decimal, currency: str) -> Decimal:
    """Round half-up to the currency's minor unit.

    Raises:
        InvalidInputError: When the rounded figure would need more than
            ``MAX_MONEY_DIGITS`` significant digits.
    """
    places = minor_unit(currency)
    with _precision(max(amount.adjusted(), 0) + places + 1):
        return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def normalize_currency(currency: str) -> str:
    """Upper-case a currency code, rejecting anything but three ASCII letters."""
    if not isinstance(currency, str):
        raise InvalidInputError(f"currency must be a string, got {type(currency).__name__}")
    code = currency.strip().upper()
    if len(code) != 3 or not code.isascii() or not code.isalpha():
        raise InvalidInputError(f"currency must be a three-letter code, got {currency!r}")
    return code
