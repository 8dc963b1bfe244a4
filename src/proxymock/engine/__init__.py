from .control import MockControl
from .defaults import Char, default_for, returns_value
from .mock import MockAssertionError, MockEngine

__all__ = [
    "Char",
    "MockAssertionError",
    "MockControl",
    "MockEngine",
    "default_for",
    "returns_value",
]
