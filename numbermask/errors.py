"""
Exceptions raised while building a number mask.

Only construction can fail. Parsing user input and repairing the caret are
total and never raise.

Each error also derives from the matching builtin, so callers can catch
either ``ConfigurationError`` or plain ``ValueError``/``TypeError``.
"""


class ConfigurationError(Exception):
    """Base class for invalid mask options."""


class DecimalPlacesRangeError(ConfigurationError, ValueError):
    """Raised when `decimal_places` is outside of [0, MaskConf.MAX_DECIMAL_PLACES]."""


class MultiplierTypeError(ConfigurationError, TypeError):
    """Raised when `multiplier` is not a finite real number."""


class MultiplierZeroError(ConfigurationError, ValueError):
    """Raised when `multiplier` equals zero."""
