"""Predicates for matching configured parameters against event arguments."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

_ANY_VALUES = frozenset({"", "0", "Any"})


def is_any(param: str) -> bool:
    """Return True if the parameter places no restriction on the value."""
    return param in _ANY_VALUES


def _items(param: str) -> Iterable[str]:
    return (item for item in (part.strip() for part in param.split(",")) if item)


def is_str_contains(param: str, arg: str) -> bool:
    """Return True if the comma-separated ``param`` lists ``arg``."""
    return any(item == arg for item in _items(param))


def is_str_any_contains(param: str, arg: str) -> bool:
    """Return True if the comma-separated ``param`` lists ``Any`` or ``arg``."""
    return any(item == "Any" or item == arg for item in _items(param))


def is_slice_contains(elems: Iterable[Any], v: Any) -> bool:
    """Return True if ``v`` is one of ``elems``."""
    return any(v == item for item in elems)


def is_numbers_must_contains(elems: Iterable[int], v: int) -> bool:
    """Return True if the number ``v`` is one of ``elems``."""
    return any(v == item for item in elems)


def is_numbers_any_contains(elems: Iterable[int], v: int) -> bool:
    """Return True if ``elems`` holds zero (any value) or ``v``."""
    return any(item == 0 or item == v for item in elems)