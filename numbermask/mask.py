"""
Number mask for text inputs.

Binds a field to a numeric store value: `format` renders the stored value,
`normalize` parses the edited text back, and the event handlers keep the
caret before the suffix.

Example:
    >>> mask = create_number_mask(prefix="$ ", decimal_places=2, locale="en_US")
    >>> mask.format(1234.5)
    '$ 1,234.50'
    >>> mask.normalize("$ 1,234.501")
    12345.01
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .caret import CaretRepair, DeferredQueue, FieldEvent, Scheduler
from .formatting import format_value
from .normalizing import normalize_text
from .sentinels import UNSET
from .settings import MaskConf, MaskSettings
from .tools import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

class NumberMask:
    """
    Formatter, normalizer and caret handlers sharing one MaskSettings.

    Args:
        settings: Validated options.
        scheduler: Deferral primitive for caret repair. Defaults to a fresh
            DeferredQueue exposed as `scheduler`; the host runs
            `mask.scheduler.run_pending()` after re-rendering the field.

    Attributes:
        settings: The MaskSettings in use.
        scheduler: Scheduler used by on_change/on_focus.
        auto_complete: Always "off".
    """

    auto_complete = MaskConf.AUTO_COMPLETE

    def __init__(self, settings: MaskSettings, scheduler: Scheduler | None = None):
        if not isinstance(settings, MaskSettings):
            raise TypeError(f"settings must be MaskSettings, but got {fmt_type(settings)}")
        self.settings = settings
        self.scheduler = scheduler if scheduler is not None else DeferredQueue()
        self._caret = CaretRepair(settings.suffix, self.scheduler)

    def format(self, value=UNSET) -> str:
        """Stored value -> field text. See formatting.format_value()."""
        return format_value(self.settings, value)

    def normalize(self, text: str, previous=UNSET) -> int | float | str | None:
        """Field text -> stored value, calling settings.on_change. See normalizing.normalize_text()."""
        return normalize_text(self.settings, text, previous)

    def on_change(self, event: FieldEvent | None) -> None:
        """Change handler: schedule caret repair."""
        self._caret(event)

    def on_focus(self, event: FieldEvent | None) -> None:
        """Focus handler: schedule caret repair."""
        self._caret(event)

    def cancel_pending(self) -> int:
        """Cancel caret repairs not yet run; call on field teardown."""
        return self._caret.cancel_pending()

    def field_props(self) -> dict[str, Any]:
        """Attributes and handlers to spread onto a field binding."""
        return {
            "format": self.format,
            "normalize": self.normalize,
            "on_change": self.on_change,
            "on_focus": self.on_focus,
            "autocomplete": self.auto_complete,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.settings!r})"


# Methods --------------------------------------------------------------------------------------------------------------

def create_number_mask(
        options: Mapping[str, Any] | None = None,
        /,
        *,
        scheduler: Scheduler | None = None,
        **kwargs,
) -> NumberMask:
    """
    Create a NumberMask from an options mapping and/or keyword options.

    Options are those of MaskSettings, as snake_case keywords or as
    camelCase mapping keys (`decimalPlaces`, `allowEmpty`, ...).

    Raises:
        DecimalPlacesRangeError: decimal_places greater than 10 or negative.
        MultiplierTypeError: multiplier not a finite number.
        MultiplierZeroError: multiplier equal to zero.

    Examples:
        >>> create_number_mask({"prefix": "p", "showPlusSign": True}, locale="en_US").format(1000)
        '+p1,000'
        >>> create_number_mask(multiplier=0)
        Traceback (most recent call last):
            ...
        numbermask.errors.MultiplierZeroError: The option `multiplier` cannot be zero.
    """
    return NumberMask(MaskSettings.from_options(options, **kwargs), scheduler=scheduler)
