"""
Sentinel for optional mask arguments where None is a meaningful value.

A stored value of None means "the field is empty", so a separate marker is
needed for "the caller passed nothing at all". All checks use identity.

Sentinels:
    UNSET: Represents an unprovided optional argument (distinguishes from None)

Helper Functions:
    is_absent: True for UNSET, None and the empty string

Example:
    >>> def format(value=UNSET) -> str:
    ...     if is_absent(value):
    ...         return ""
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'is_absent',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, compared by identity. Pickling returns the singleton.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def is_absent(value: Any) -> bool:
    """Return True when a stored value means 'no value': UNSET, None or the empty string."""
    return value is UNSET or value is None or (isinstance(value, str) and value == "")
