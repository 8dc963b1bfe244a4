from __future__ import annotations

from typing import Any, NewType

NoneType = type(None)

# Single-character return kind; its default is the NUL character.
Char = NewType("Char", str)

# bool defaults to True, not False. Callers rely on it; keep it.
PRIMITIVE_DEFAULTS: dict[Any, Any] = {
    bool: True,
    int: 0,
    float: 0.0,
    complex: 0j,
    Char: "\x00",
}


def returns_value(return_type: Any) -> bool:
    """False only for methods annotated ``-> None``."""
    return return_type is not NoneType and return_type is not None


def default_for(return_type: Any) -> Any:
    if not returns_value(return_type):
        return None
    try:
        return PRIMITIVE_DEFAULTS.get(return_type)
    except TypeError:
        # unhashable annotation objects are reference kinds
        return None


__all__ = ["Char", "PRIMITIVE_DEFAULTS", "default_for", "returns_value"]
