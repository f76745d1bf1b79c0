"""Assertion library used to evaluate expectations."""

from ._base import CheckResult, short_repr, type_name
from .basic import assert_equal, assert_is_instance, assert_true
from .deep import deep_diff, deep_equal

__all__ = [
    "CheckResult",
    "assert_equal",
    "assert_is_instance",
    "assert_true",
    "deep_diff",
    "deep_equal",
    "short_repr",
    "type_name",
]
