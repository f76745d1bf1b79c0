"""Basic assertion implementations.

Each assertion evaluates immediately and returns a :class:`CheckResult`;
none of them raise on a mismatch. An exception escaping a user-supplied
``__eq__`` or comparator predicate is turned into a failed result.
"""

from typing import Any

from tenet.assertions._base import CheckResult, short_repr, type_name
from tenet.assertions.deep import deep_diff


def assert_equal(actual: Any, expected: Any, description: str) -> CheckResult:
    """Check that actual is structurally equal to expected."""
    try:
        diff = deep_diff(actual, expected)
    except Exception as exc:
        diff = f"comparison raised {type(exc).__name__}: {exc}"

    return CheckResult(
        description=description,
        passed=diff is None,
        message=diff,
    )


def assert_true(value: Any, description: str, message: str | None = None) -> CheckResult:
    """Check that value is truthy."""
    passed = bool(value)
    return CheckResult(
        description=description,
        passed=passed,
        message=None if passed else message,
    )


def assert_is_instance(obj: Any, kind: Any, description: str) -> CheckResult:
    """Check that obj is an instance of kind.

    ``kind`` may be a class, a tuple of classes, or a class name. A name
    matches when any class in the object's MRO carries it, either bare
    (``"ValueError"``) or qualified with its module (``"builtins.ValueError"``).
    """
    if isinstance(kind, str):
        passed = obj is not None and any(
            kind in (cls.__name__, f"{cls.__module__}.{cls.__qualname__}") for cls in type(obj).__mro__
        )
    else:
        passed = isinstance(obj, kind)

    return CheckResult(
        description=description,
        passed=passed,
        message=None if passed else f"Expected instance of {type_name(kind)}, got {_describe(obj)}",
    )


def _describe(obj: Any) -> str:
    if obj is None:
        return "None"
    return f"{type(obj).__name__}: {short_repr(obj)}"
