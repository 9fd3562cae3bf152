"""
Rounding with type conversion.

round_convert() snaps a scalar to a number of fractional digits and hands
the result to another scalar type (float -> int, float -> fraction, ...).
Floats and decimals are rounded on their exact Decimal image, so a float is
rounded by its true binary value, not by its shortest repr. Fractions have
no finite decimal image in general and are rounded with integer arithmetic.
"""

from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext
from fractions import Fraction
from typing import Any, Literal

from pydense.core.exceptions import NumericalError, ValidationError
from pydense.core.protocols import Scalar

RoundingMode = Literal['half_even', 'half_away_from_zero']

# decimal's ROUND_HALF_UP rounds ties away from zero
_DECIMAL_ROUNDING = {
    'half_even': ROUND_HALF_EVEN,
    'half_away_from_zero': ROUND_HALF_UP,
}


def check_rounding_mode(mode: str) -> str:
    """
    Verify mode names a supported rounding policy.

    Raises:
        ValueError: If mode is unknown
    """
    if mode not in _DECIMAL_ROUNDING:
        raise ValueError(
            f"Unknown rounding mode: {mode!r} "
            f"(expected one of {sorted(_DECIMAL_ROUNDING)})"
        )
    return mode


def check_decimals(decimals: int) -> int:
    """
    Verify decimals is a non-negative integer.

    Raises:
        ValidationError: If decimals is negative or not an int
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValidationError(
            f"decimals: expected int, got {type(decimals).__name__}"
        )
    if decimals < 0:
        raise ValidationError(f"decimals: must be >= 0, got {decimals}")
    return decimals


def round_decimal(
    value: Decimal,
    decimals: int,
    mode: RoundingMode = 'half_even',
) -> Decimal:
    """Round an exact decimal to ``decimals`` fractional digits."""
    if not value.is_finite():
        return value
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # Enough digits that quantize never overflows the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        return value.quantize(quantum, rounding=_DECIMAL_ROUNDING[mode])


def round_fraction(
    value: Fraction,
    decimals: int,
    mode: RoundingMode = 'half_even',
) -> Decimal:
    """Round a fraction to ``decimals`` fractional digits, exactly."""
    scaled = abs(value) * 10 ** decimals
    quotient, remainder = divmod(scaled.numerator, scaled.denominator)
    twice = 2 * remainder
    if twice > scaled.denominator or (
        twice == scaled.denominator
        and (mode == 'half_away_from_zero' or quotient % 2)
    ):
        quotient += 1
    if value < 0:
        quotient = -quotient
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(quotient))) + 2)
        return Decimal(quotient).scaleb(-decimals)


def round_convert(
    value: Any,
    decimals: int,
    mode: RoundingMode,
    source: Scalar,
    target: Scalar,
) -> Any:
    """
    Round a scalar of type ``source`` and convert it to type ``target``.

    Args:
        value: Value stored in a ``source`` container
        decimals: Number of fractional digits to keep
        mode: 'half_even' (banker's rounding) or 'half_away_from_zero'
        source: Scalar type of value
        target: Scalar type of the result

    Returns:
        The rounded value as a ``target`` scalar

    Raises:
        NumericalError: If a NaN/Inf value is converted to a type that
            cannot represent it
    """
    if isinstance(value, Fraction):
        rounded = round_fraction(value, decimals, mode)
    else:
        rounded = round_decimal(source.to_decimal(value), decimals, mode)
    try:
        return target.from_decimal(rounded)
    except (ValueError, OverflowError, ArithmeticError) as e:
        raise NumericalError(
            f"cannot convert {value!r} to {target.name}: {e}"
        ) from e


__all__ = [
    'RoundingMode',
    'check_rounding_mode',
    'check_decimals',
    'round_decimal',
    'round_fraction',
    'round_convert',
]
