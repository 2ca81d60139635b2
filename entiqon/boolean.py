"""Flexible parsing of values into booleans.

Accepted inputs: bools as they are; strings "true", "1", "yes", "y", "t",
"on" (true) and "false", "0", "no", "n", "f", "off" (false), case-insensitive
and trimmed; integers and floats, where zero is false and anything else true.
"""

from __future__ import annotations

_TRUTHY = frozenset({"true", "1", "yes", "y", "t", "on"})
_FALSY = frozenset({"false", "0", "no", "n", "f", "off"})


def parse_from(value: object) -> bool:
    """Interpret value as a boolean.

    Raises ValueError for None or an unrecognised string and TypeError for
    an unsupported type.
    """
    if value is None:
        raise ValueError("None cannot be parsed as boolean")
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUTHY:
            return True
        if word in _FALSY:
            return False
        raise ValueError(f"invalid boolean string: {value!r}")
    if isinstance(value, (int, float)):
        return value != 0
    raise TypeError(f"unsupported type {type(value).__name__} for boolean parsing")