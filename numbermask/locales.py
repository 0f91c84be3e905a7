"""
Locale-aware number rendering behind a small capability interface.

The mask core only needs one operation from its environment: render a
non-negative Decimal with a fixed count of fraction digits, grouped the way
the locale groups. `NumberFormatter` describes that capability;
`BabelNumberFormatter` implements it with the CLDR data shipped by Babel.
Hosts with their own locale service pass another implementation through
`MaskSettings.formatter`.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from decimal import Decimal
from functools import lru_cache
from typing import Protocol, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
from babel.core import Locale, default_locale
from babel.numbers import parse_pattern

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en_US"

# What Babel reports for the C and POSIX environments; their patterns have no grouping
_POSIX_LOCALES = frozenset({"en_US_POSIX", "C", "POSIX"})


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class NumberFormatter(Protocol):
    """Capability: number -> grouped string with a fixed fraction digit range."""

    def format_number(
            self,
            value: Decimal,
            *,
            min_fraction_digits: int,
            max_fraction_digits: int,
            locale: "str | Locale | None" = None,
    ) -> str: ...


class BabelNumberFormatter:
    """
    NumberFormatter backed by Babel's CLDR decimal patterns.

    The locale's standard decimal pattern supplies grouping sizes and symbols;
    only its fraction precision is replaced.

    Examples:
        >>> f = BabelNumberFormatter()
        >>> f.format_number(Decimal("1000"), min_fraction_digits=1, max_fraction_digits=1, locale="en-US")
        '1,000.0'
        >>> f.format_number(Decimal("1234.5"), min_fraction_digits=2, max_fraction_digits=2, locale="de_DE")
        '1.234,50'
    """

    def __init__(self, *, group_separator: bool = True):
        self.group_separator = group_separator

    def format_number(
            self,
            value: Decimal,
            *,
            min_fraction_digits: int,
            max_fraction_digits: int,
            locale: "str | Locale | None" = None,
    ) -> str:
        loc = resolve_locale(locale)
        # Fresh pattern object: the one on Locale.decimal_formats is shared CLDR data
        pattern = parse_pattern(loc.decimal_formats.get(None).pattern)
        pattern.frac_prec = (min_fraction_digits, max_fraction_digits)
        return pattern.apply(value, loc, group_separator=self.group_separator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(group_separator={self.group_separator})"


# Methods --------------------------------------------------------------------------------------------------------------

def resolve_locale(locale: "str | Locale | None" = None) -> Locale:
    """
    Return a Babel Locale for an identifier, a Locale, or None.

    None means the environment default (LC_NUMERIC, LC_ALL, LANG...), with
    FALLBACK_LOCALE when the environment defines none or only the C/POSIX
    locale. Both "en_US" and BCP 47 style "en-US" identifiers are accepted.

    Raises:
        babel.core.UnknownLocaleError: If no CLDR data exists for the identifier.
        ValueError: If the identifier is malformed.
    """
    if isinstance(locale, Locale):
        return locale
    if locale is None:
        locale = default_locale("LC_NUMERIC")
        if locale is None or locale in _POSIX_LOCALES:
            logger.debug("no environment locale found (got %r), using %s", locale, FALLBACK_LOCALE)
            locale = FALLBACK_LOCALE
    return _parse_locale(str(locale).replace("-", "_"))


@lru_cache(maxsize=64)
def _parse_locale(identifier: str) -> Locale:
    return Locale.parse(identifier)
