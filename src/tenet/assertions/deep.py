"""Structural equality.

Compound values are compared element by element and plain objects attribute
by attribute, so two distinct instances holding the same data are equal.
A :class:`~tenet.comparators.Comparator` placed anywhere inside the expected
value is applied to the actual value found at the same position.
"""

from __future__ import annotations

import types
from collections.abc import Mapping
from typing import Any

from tenet.assertions._base import short_repr
from tenet.comparators import Comparator


def deep_diff(actual: Any, expected: Any, path: str = "value") -> str | None:
    """Return a description of the first difference, or None if the values match."""
    return _diff(actual, expected, path, set())


def _diff(actual: Any, expected: Any, path: str, seen: set[tuple[int, int]]) -> str | None:
    if actual is expected:
        return None
    if isinstance(expected, Comparator):
        if expected.compare(actual):
            return None
        return f"{path}: {short_repr(actual)} is not {expected.describe()}"

    # a pair already under comparison is treated as equal, so cycles terminate
    pair = (id(actual), id(expected))
    if pair in seen:
        return None
    seen.add(pair)

    if isinstance(expected, Mapping) and isinstance(actual, Mapping):
        for key in expected:
            if key not in actual:
                return f"{path}[{key!r}]: missing"
        for key in actual:
            if key not in expected:
                return f"{path}[{key!r}]: unexpected key"
        for key, value in expected.items():
            diff = _diff(actual[key], value, f"{path}[{key!r}]", seen)
            if diff:
                return diff
        return None

    if _is_sequence(expected) and _is_sequence(actual):
        if len(actual) != len(expected):
            return f"{path}: length {len(actual)}, expected {len(expected)}"
        for i, (got, want) in enumerate(zip(actual, expected)):
            diff = _diff(got, want, f"{path}[{i}]", seen)
            if diff:
                return diff
        return None

    if _compares_by_identity(expected) and type(actual) is type(expected):
        got_attrs, want_attrs = _attributes(actual), _attributes(expected)
        if got_attrs is not None and want_attrs is not None:
            for name in sorted(set(got_attrs) | set(want_attrs)):
                if name not in got_attrs or name not in want_attrs:
                    return f"{path}.{name}: missing"
                diff = _diff(got_attrs[name], want_attrs[name], f"{path}.{name}", seen)
                if diff:
                    return diff
            return None

    if actual == expected:
        return None
    return f"{path}: got {short_repr(actual)}, expected {short_repr(expected)}"


def deep_equal(actual: Any, expected: Any) -> bool:
    return deep_diff(actual, expected) is None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _compares_by_identity(value: Any) -> bool:
    if isinstance(value, (type, types.ModuleType)) or callable(value):
        return False
    return type(value).__eq__ is object.__eq__


def _attributes(value: Any) -> dict[str, Any] | None:
    attrs = getattr(value, "__dict__", None)
    if attrs is not None:
        return dict(attrs)
    slots = getattr(type(value), "__slots__", None)
    if slots is None:
        return None
    if isinstance(slots, str):
        slots = (slots,)
    return {name: getattr(value, name) for name in slots if hasattr(value, name)}
