from __future__ import annotations

from typing import Any


def are_equal(value: Any, other: Any) -> bool:
    """Null-safe equality: two ``None`` are equal, a single ``None`` never is."""
    if value is None and other is None:
        return True
    if value is None or other is None:
        return False
    return bool(value == other)
