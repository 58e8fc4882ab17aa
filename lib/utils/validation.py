"""Validation helpers used while loading configuration and templates."""

from typing import Any


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def ensure_int_in_range(value: Any, name: str, low: int, high: int) -> int:
    """Return ``value`` if it is an ``int`` within ``[low, high]``."""

    # bool is an int subclass; ``port: true`` in YAML is still a mistake.
    ensure(
        isinstance(value, int) and not isinstance(value, bool),
        f"{name} must be an integer, got {value!r}",
    )
    ensure(low <= value <= high, f"{name} must be between {low} and {high}, got {value}")
    return value
