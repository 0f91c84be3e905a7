"""
Display string (possibly mid-edit) -> stored value.

Typed digits fill from the right past an implicit decimal point: with two
decimal places the digit stream "1234" means 12.34, whatever separators or
decoration surround it. Everything except digits and a recognised minus is
noise, so normalization never fails on what the user types.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
import sys
from decimal import Decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import number_to_string, to_decimal
from .sentinels import UNSET, is_absent
from .settings import MaskConf, MaskSettings

_NON_DIGITS = re.compile(r"[^0-9]")


# Methods --------------------------------------------------------------------------------------------------------------

def normalize_text(settings: MaskSettings, text: str, previous=UNSET) -> int | float | str | None:
    """
    Parse field text into the value to store.

    Args:
        settings: Mask options.
        text: Current field text, decorated and possibly half-edited.
        previous: Value stored before this edit; decides whether clearing
            the field yields None or zero when `allow_empty` is set.

    Returns:
        None for a cleared field (only with `allow_empty`), a numeric string
        with `string_value`, otherwise an int or float in the caller's unit.

    Empty field rules (allow_empty):
        - no digits left: None if `previous` was empty or zero, else 0
        - zero with fewer digits than a rendered zero, after a zero: None,
          i.e. backspace over "0.00" clears the field
        - a stored zero counts as empty here, so clearing a zero field gives None

    Digit streams longer than MaskConf.MAX_DIGITS keep their leading digits
    and the result is clamped to the largest finite float.

    Examples:
        >>> normalize_text(MaskSettings(prefix="p", decimal_places=1), "p1,234a")
        123.4
        >>> normalize_text(MaskSettings(allow_negative=True), "-1,234")
        -1234
        >>> normalize_text(MaskSettings(allow_empty=True, decimal_places=2), "0.0", 0) is None
        True
    """
    text = "" if text is None else str(text)

    negative = settings.allow_negative and _has_minus(settings, text)
    digits = _NON_DIGITS.sub("", _strip_decoration(settings, text))

    if settings.allow_empty and _clears_field(settings, digits, previous):
        result = None
    else:
        result = _stored_number(settings, digits, negative)
        if settings.string_value:
            result = number_to_string(result)

    if settings.on_change is not None:
        settings.on_change(result)
    return result


# Private Methods ------------------------------------------------------------------------------------------------------

def _has_minus(settings: MaskSettings, text: str) -> bool:
    """Minus before the prefix (optionally followed by one space) or right before the suffix."""
    if re.match(r"-\s?" + re.escape(settings.prefix), text):
        return True
    return text.endswith("-" + settings.suffix)


def _strip_decoration(settings: MaskSettings, text: str) -> str:
    """Drop the first prefix and the last suffix occurrence, both may contain digits."""
    if settings.prefix:
        text = text.replace(settings.prefix, "", 1)
    if settings.suffix:
        head, found, tail = text.rpartition(settings.suffix)
        if found:
            text = head + tail
    return text


def _clears_field(settings: MaskSettings, digits: str, previous) -> bool:
    if not digits:
        return is_absent(previous) or _is_zero(previous)
    return _is_zero(previous) and not digits.strip("0") and len(digits) <= settings.decimal_places


def _is_zero(value) -> bool:
    if is_absent(value):
        return False
    try:
        return to_decimal(value) == 0
    except (TypeError, ValueError):
        # Previous value is whatever the store held; an unreadable one is simply not zero
        return False


def _stored_number(settings: MaskSettings, digits: str, negative: bool) -> int | float:
    magnitude = int(digits.lstrip("0")[:MaskConf.MAX_DIGITS] or "0")

    if settings.decimal_places == 0 and isinstance(settings.multiplier, int):
        number = magnitude * settings.multiplier
        if negative:
            # int has no negative zero
            number = -number if number else -0.0
        return number

    number = float(Decimal(magnitude).scaleb(-settings.decimal_places))
    if negative:
        number = -number
    number *= settings.multiplier
    if math.isinf(number):
        number = math.copysign(sys.float_info.max, number)
    return number
