from typing import Any


def is_valid(value: Any) -> bool:
    """True when ``value`` is a string with at least one non-blank character."""
    return isinstance(value, str) and bool(value.strip())
