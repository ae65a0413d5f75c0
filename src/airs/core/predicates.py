"""Value predicates used by the state façade."""

from __future__ import annotations

from typing import Any


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True for ints and floats.  Booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_object(value: Any) -> bool:
    """True for anything that is not ``None`` or a scalar primitive."""
    return value is not None and not isinstance(value, (str, bytes, int, float, complex))


def is_literal_object(value: Any) -> bool:
    """True for plain ``dict`` instances (not subclasses or other mappings)."""
    return type(value) is dict
