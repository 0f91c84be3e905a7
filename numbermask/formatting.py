"""
Stored value -> display string.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import to_decimal
from .sentinels import UNSET, is_absent
from .settings import MaskSettings


# Methods --------------------------------------------------------------------------------------------------------------

def format_value(settings: MaskSettings, value=UNSET) -> str:
    """
    Render a stored value as the text shown in the field.

    The stored value is divided by the multiplier, rounded half away from zero
    to exactly `decimal_places` fraction digits and grouped per locale. The
    result reads ``[sign][prefix]<number>[suffix]``.

    Args:
        settings: Mask options.
        value: Stored value; UNSET, None and "" mean empty.

    Returns:
        Display text, or "" for an empty value when `allow_empty` is set.

    Raises:
        ValueError: For non-numeric strings or non-finite numbers in the store.
        TypeError: For unsupported stored value types.

    Examples:
        >>> format_value(MaskSettings(prefix="p", show_plus_sign=True, locale="en_US"), 1000)
        '+p1,000'
        >>> format_value(MaskSettings(allow_empty=True), None)
        ''
    """
    if is_absent(value):
        if settings.allow_empty:
            return ""
        value = 0

    displayed = to_decimal(value) / Decimal(repr(settings.multiplier))
    # is_signed() also catches -0, a minus typed before any digit
    negative = displayed.is_signed()

    number = settings.formatter.format_number(
        _round_places(abs(displayed), settings.decimal_places),
        min_fraction_digits=settings.decimal_places,
        max_fraction_digits=settings.decimal_places,
        locale=settings.locale,
    )
    return f"{sign_for(settings, negative)}{settings.prefix}{number}{settings.suffix}"


def sign_for(settings: MaskSettings, negative: bool) -> str:
    """
    Sign decoration placed before the prefix, including the optional trailing space.

    Negative values lose their sign unless `allow_negative` is set.
    """
    if negative and settings.allow_negative:
        sign = "-"
    elif settings.show_plus_sign:
        sign = "+"
    else:
        return ""
    return sign + settings.sign_space


# Private Methods ------------------------------------------------------------------------------------------------------

def _round_places(value: Decimal, places: int) -> Decimal:
    with localcontext() as ctx:
        # quantize fails when the result needs more digits than the context precision
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
