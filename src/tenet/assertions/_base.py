"""Check result type shared by all assertions."""

from typing import Any

from pydantic import BaseModel


def short_repr(value: Any, max_len: int = 60) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def type_name(kind: Any) -> str:
    """Readable name for a class, tuple of classes, or class-name string."""
    if isinstance(kind, str):
        return kind
    if isinstance(kind, tuple):
        return " | ".join(type_name(k) for k in kind)
    return getattr(kind, "__name__", repr(kind))


class CheckResult(BaseModel):
    """Result of evaluating a single check.

    Attributes:
    ----------
    description : str
        Line reported for the check, e.g. ``"add - return value"``
    passed : bool
        Whether the check passed
    message : str | None
        Diagnostic explaining a failure, None when the check passed
    """

    description: str
    passed: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.passed
