"""
Number mask configuration: constants and the validated settings record.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping

# Third-party ----------------------------------------------------------------------------------------------------------
from babel.core import Locale

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import DecimalPlacesRangeError, MultiplierTypeError, MultiplierZeroError
from .locales import BabelNumberFormatter, NumberFormatter
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class MaskConf:
    """
    Default configuration constants for number masks.

    Attributes:
        MAX_DECIMAL_PLACES: Upper bound for MaskSettings.decimal_places.
        MAX_DIGITS: Longest digit stream normalize() converts; extra trailing digits are dropped.
        AUTO_COMPLETE: Value of the field's autocomplete attribute, masks
            rewrite the text on every keystroke so browser suggestions are disabled.
        OPTION_ALIASES: camelCase option names accepted by MaskSettings.from_options().
        NULLABLE_OPTIONS: Fields where None is a real value; None elsewhere means "use the default".
    """
    MAX_DECIMAL_PLACES = 10
    MAX_DIGITS = 300
    AUTO_COMPLETE = "off"

    OPTION_ALIASES = {
        "decimalPlaces": "decimal_places",
        "stringValue": "string_value",
        "allowNegative": "allow_negative",
        "allowEmpty": "allow_empty",
        "showPlusSign": "show_plus_sign",
        "spaceAfterSign": "space_after_sign",
        "onChange": "on_change",
    }

    NULLABLE_OPTIONS = frozenset({"locale", "on_change", "formatter"})


@dataclass(frozen=True)
class MaskSettings:
    """
    Immutable, validated options of a number mask.

    Created once per mask and safe to share between masks and fields.

    Attributes:
        prefix: Decoration rendered before the number, after the sign.
        suffix: Decoration rendered after the number.
        decimal_places: Fixed count of fraction digits, also the implicit
            decimal shift applied to typed digits. Digit strings such as "4" are accepted.
        multiplier: Stored value = displayed value * multiplier.
        locale: Babel locale identifier or Locale; None for the environment default.
        string_value: Store numeric strings instead of numbers.
        allow_negative: Keep and render the minus sign.
        allow_empty: Let the field be cleared to None.
        show_plus_sign: Render "+" for non-negative values.
        space_after_sign: Put one space between the sign and the prefix.
        on_change: Called with each value produced by normalize().
        formatter: Locale number rendering capability; BabelNumberFormatter by default.

    Raises:
        DecimalPlacesRangeError: decimal_places outside [0, 10].
        MultiplierTypeError: multiplier is not a finite real number.
        MultiplierZeroError: multiplier is zero.

    Examples:
        >>> MaskSettings(prefix="$", decimal_places=2).decimal_places
        2
        >>> MaskSettings(decimal_places=11)
        Traceback (most recent call last):
            ...
        numbermask.errors.DecimalPlacesRangeError: The maximum value for the option `decimal_places` is 10.
    """
    prefix: str = ""
    suffix: str = ""
    decimal_places: int = 0
    multiplier: int | float = 1
    locale: str | Locale | None = None
    string_value: bool = False
    allow_negative: bool = False
    allow_empty: bool = False
    show_plus_sign: bool = False
    space_after_sign: bool = False
    on_change: Callable[[Any], Any] | None = None
    formatter: NumberFormatter | None = None

    def __post_init__(self):
        # prefix, suffix
        for name in ("prefix", "suffix"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")

        # decimal_places
        decimal_places = self.decimal_places
        if isinstance(decimal_places, str) and decimal_places.strip().isdigit():
            decimal_places = int(decimal_places)
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
            raise DecimalPlacesRangeError(
                f"The option `decimal_places` must be an int, but got {fmt_type(self.decimal_places)}")
        if decimal_places > MaskConf.MAX_DECIMAL_PLACES:
            raise DecimalPlacesRangeError(
                f"The maximum value for the option `decimal_places` is {MaskConf.MAX_DECIMAL_PLACES}.")
        if decimal_places < 0:
            raise DecimalPlacesRangeError(
                f"The option `decimal_places` cannot be negative, got {fmt_value(decimal_places)}")
        object.__setattr__(self, 'decimal_places', decimal_places)

        # multiplier
        multiplier = self.multiplier
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float)):
            raise MultiplierTypeError(
                f"The option `multiplier` should be of type number, but got {fmt_type(multiplier)}")
        if not math.isfinite(multiplier):
            raise MultiplierTypeError(
                f"The option `multiplier` should be a finite number, but got {fmt_value(multiplier)}")
        if multiplier == 0:
            raise MultiplierZeroError("The option `multiplier` cannot be zero.")

        if self.formatter is None:
            object.__setattr__(self, 'formatter', BabelNumberFormatter())

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None, /, **kwargs) -> "MaskSettings":
        """
        Build settings from a configuration mapping and/or keyword options.

        Keys may use the camelCase names of MaskConf.OPTION_ALIASES or the
        field names; unrecognized keys are ignored. Keyword options win over
        mapping entries. A None value means "use the default", except for
        MaskConf.NULLABLE_OPTIONS.

        Examples:
            >>> MaskSettings.from_options({"decimalPlaces": 2, "allowEmpty": True}).allow_empty
            True
        """
        known = {f.name for f in fields(cls)}
        merged = {**dict(options or {}), **kwargs}

        resolved = {}
        for key, value in merged.items():
            name = MaskConf.OPTION_ALIASES.get(key, key)
            if name not in known:
                continue
            if value is None and name not in MaskConf.NULLABLE_OPTIONS:
                continue
            resolved[name] = value
        return cls(**resolved)

    @property
    def sign_space(self) -> str:
        return " " if self.space_after_sign else ""
