"""
Standardize stored mask values for exact display arithmetic.

Stored values arrive as ints, floats, numeric strings or third-party numeric
types. Formatting converts them to Decimal first so that grouping and fixed
fraction rendering never see binary float artifacts. Normalizing goes the
other way and renders floats as short plain decimal strings.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def to_decimal(value) -> Decimal:
    """
    Convert a stored value to a finite Decimal.

    Parameters
    ----------
    value : int, float, str, Decimal, Fraction or any type implementing __float__
        Stored value. Strings may carry surrounding whitespace and a sign,
        e.g. ``" -1234.5 "``.

    Returns
    -------
    Decimal
        Exact decimal. Floats go through their shortest repr, so ``0.1``
        becomes ``Decimal('0.1')`` rather than its binary expansion.

    Raises
    ------
    TypeError
        For bool and unsupported types.
    ValueError
        For non-numeric strings and non-finite values (nan, inf).

    Detection Priority
    ------------------
    1. Decimal → as is
    2. int → exact
    3. float → shortest repr
    4. str → parsed literal
    5. Fraction → exact division
    6. __float__() → general fallback (numpy scalars etc.)

    Examples
    --------
    >>> to_decimal(0.3333)
    Decimal('0.3333')
    >>> to_decimal("-1234")
    Decimal('-1234')
    """
    # bool is a subclass of int, reject it explicitly
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported as stored value, got {fmt_value(value)}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"stored value is not a numeric string: {fmt_value(value)}") from e
    elif isinstance(value, Fraction):
        result = Decimal(value.numerator) / Decimal(value.denominator)
    elif hasattr(value, '__float__'):
        try:
            result = Decimal(repr(float(value)))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to a number: {e}") from e
    else:
        raise TypeError(
            f"unsupported stored value type: {fmt_type(value)}. "
            f"Expected int, float, numeric str, Decimal, Fraction or a type implementing __float__"
        )

    if not result.is_finite():
        raise ValueError(f"stored value must be finite, got {fmt_value(value)}")
    return result


def number_to_string(number: int | float) -> str:
    """
    Render a number as the shortest plain decimal string.

    Never uses exponent notation and drops a trailing ``.0``. Negative zero
    keeps its sign, so a freshly typed minus survives the next format pass.

    Examples
    --------
    >>> number_to_string(12340.0)
    '12340'
    >>> number_to_string(1e-05)
    '0.00001'
    >>> number_to_string(-0.0)
    '-0'
    """
    if isinstance(number, int):
        return str(number)

    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"

    return format(Decimal(repr(number)).normalize(), "f")
