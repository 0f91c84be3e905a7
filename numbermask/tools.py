#
# Number Mask Tools
#

# Standard library -----------------------------------------------------------------------------------------------------

from typing import Any

_MAX_REPR = 120
_ELLIPSIS = "..."


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """Format type information for exception and log messages.

    Args:
        obj: Any Python object or type to extract type information from.

    Returns:
        Formatted type string like "<type: int>".

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(str)
        '<type: str>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)

    return f"<type: {_fmt_truncate(type_name, _MAX_REPR)}>"


def fmt_value(x: Any) -> str:
    """
    Format a single value as a type-value pair for exception and log messages.

    Broken __repr__ methods are handled; inner ">" is escaped.

    Examples:
        >>> fmt_value(0)
        '<int: 0>'
        >>> fmt_value("x")
        "<str: 'x'>"
    """
    t = type(x).__name__

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    r = _fmt_truncate(base_repr.replace(">", "\\>"), _MAX_REPR)
    return f"<{t}: {r}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int) -> str:
    """
    Truncate s to at most max_len characters before appending the ellipsis.

    Quoted reprs keep their quotes and get the ellipsis outside the closing quote.
    """
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner = s[1:1 + max(1, max_len - 4)]
        return f"{s[0]}{inner}{s[0]}{_ELLIPSIS}"

    return s[:max_len] + _ELLIPSIS
