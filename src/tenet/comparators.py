"""Fuzzy/relational comparators.

A :class:`Comparator` pairs a binary predicate with a right-hand operand and
is evaluated as ``predicate(actual, rhs)``. Comparators can stand in for any
expected value: return values, captured stream text, mutated arguments, or a
nested element of a structured expected value.

    >>> from tenet.comparators import gt
    >>> gt(10).compare(11)
    True
"""

from __future__ import annotations

import math
import operator
import re
from collections.abc import Callable
from typing import Any


Predicate = Callable[[Any, Any], Any]

_OPERATOR_NAMES: dict[Callable[..., Any], str] = {
    operator.gt: ">",
    operator.ge: ">=",
    operator.lt: "<",
    operator.le: "<=",
    operator.eq: "==",
    operator.ne: "!=",
}


class Comparator:
    """Binary predicate plus a captured right-hand operand.

    Parameters
    ----------
    predicate:
        Callable taking ``(actual, rhs)`` positionally and returning a truthy value.
    rhs:
        Right-hand operand handed to the predicate on every comparison.
    name:
        Human-readable operator name used in check descriptions. Defaults to the
        operator symbol for :mod:`operator` comparisons, else the predicate name.
    """

    __slots__ = ("predicate", "rhs", "name")

    def __init__(self, predicate: Predicate, rhs: Any, name: str | None = None) -> None:
        if not callable(predicate):
            raise TypeError(f"Comparator predicate must be callable, got {predicate!r}")
        self.predicate = predicate
        self.rhs = rhs
        self.name = name or _OPERATOR_NAMES.get(predicate) or getattr(predicate, "__name__", "compare")

    def compare(self, actual: Any) -> bool:
        """Evaluate ``predicate(actual, rhs)``."""
        return bool(self.predicate(actual, self.rhs))

    def describe(self) -> str:
        return f"{self.name} {self.rhs!r}"

    def __repr__(self) -> str:
        return f"Comparator({self.describe()})"


def gt(rhs: Any) -> Comparator:
    return Comparator(operator.gt, rhs)


def ge(rhs: Any) -> Comparator:
    return Comparator(operator.ge, rhs)


def lt(rhs: Any) -> Comparator:
    return Comparator(operator.lt, rhs)


def le(rhs: Any) -> Comparator:
    return Comparator(operator.le, rhs)


def eq(rhs: Any) -> Comparator:
    return Comparator(operator.eq, rhs)


def ne(rhs: Any) -> Comparator:
    return Comparator(operator.ne, rhs)


def contains(rhs: Any) -> Comparator:
    """Match when ``rhs in actual``."""
    return Comparator(lambda actual, item: item in actual, rhs, name="contains")


def startswith(prefix: str) -> Comparator:
    return Comparator(lambda actual, p: str(actual).startswith(p), prefix, name="starts with")


def endswith(suffix: str) -> Comparator:
    return Comparator(lambda actual, s: str(actual).endswith(s), suffix, name="ends with")


def matches(pattern: str | re.Pattern[str], flags: int = 0) -> Comparator:
    """Match when the regular expression is found anywhere in ``str(actual)``."""
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)
    return Comparator(lambda actual, rx: rx.search(str(actual)) is not None, compiled, name="matches")


def approx(rhs: float, *, rel: float = 1e-9, abs: float = 0.0) -> Comparator:
    """Match numbers within a relative or absolute tolerance of ``rhs``."""

    def _close(actual: Any, expected: float) -> bool:
        return math.isclose(actual, expected, rel_tol=rel, abs_tol=abs)

    return Comparator(_close, rhs, name="approx")


def length(rhs: int) -> Comparator:
    return Comparator(lambda actual, n: len(actual) == n, rhs, name="has length")


def is_instance(rhs: type | tuple[type, ...]) -> Comparator:
    return Comparator(isinstance, rhs, name="is instance of")


__all__ = [
    "Comparator",
    "approx",
    "contains",
    "endswith",
    "eq",
    "ge",
    "gt",
    "is_instance",
    "le",
    "length",
    "lt",
    "matches",
    "ne",
    "startswith",
]
