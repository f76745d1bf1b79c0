"""Declarative scenario definitions.

This module provides:

- :class:`ArgList`, the positional/named argument bundle used for both
  construction and the method call.
- :class:`CallSpec`, the target type, its construction arguments and the
  method name to invoke.
- :class:`ExpectationSpec`, the optional expected outcomes of a call.
- :class:`Scenario`, one named unit tying a call to its expectations.
- :func:`validate_scenario`, which turns raw mappings into scenarios and
  fails fast on anything malformed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from tenet.comparators import Comparator
from tenet.errors import MalformedScenarioError


class ArgList(BaseModel):
    """Positional and named arguments for a call.

    Accepts ``None`` (no arguments), a list/tuple (positional only), a mapping
    (named only), or the full ``{"args": [...], "kwargs": {...}}`` form. The
    argument objects themselves are held by reference, never copied.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    args: list[Any] = Field(default_factory=list)
    kwargs: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, (list, tuple)):
            return {"args": list(value)}
        if isinstance(value, Mapping):
            if value and set(value) <= {"args", "kwargs"}:
                return value
            return {"kwargs": dict(value)}
        return value

    @classmethod
    def of(cls, *args: Any, **kwargs: Any) -> ArgList:
        """Build an argument list the way the call itself would be written."""
        return cls(args=list(args), kwargs=kwargs)

    def state(self) -> Any:
        """Current argument values in the shape a ``mutates`` expectation is written in.

        The positional list when there are no named arguments, the named mapping
        when there are no positional ones, else an ``(args, kwargs)`` tuple.
        """
        if not self.kwargs:
            return self.args
        if not self.args:
            return self.kwargs
        return (self.args, self.kwargs)

    def __bool__(self) -> bool:
        return bool(self.args or self.kwargs)


class CallSpec(BaseModel):
    """What to construct and which method to call on it.

    Attributes
    ----------
    target
        The class to instantiate (declared as ``type``). Must be a class object,
        not a name and not an instance.
    construct_args
        Constructor arguments (declared as ``construct``); empty when absent.
    method
        Name of the method invoked on the constructed instance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True, arbitrary_types_allowed=True)

    target: type = Field(alias="type")
    construct_args: ArgList = Field(default_factory=ArgList, alias="construct")
    method: str

    @field_validator("method")
    @classmethod
    def _method_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"method must be an attribute name, got {value!r}")
        return value


class ExpectationSpec(BaseModel):
    """Expected outcomes of a call. Every field is optional.

    A field counts as declared only when it was supplied explicitly, so
    ``return_value=None`` expects ``None`` while omitting ``return_value``
    skips the check entirely.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    return_value: Any = None
    lives: bool = False
    dies: bool = False
    throws: type[BaseException] | tuple[type[BaseException], ...] | str | None = None
    stdout: str | Comparator | None = None
    stderr: str | Comparator | None = None
    mutates: Any = None

    def is_declared(self, field: str) -> bool:
        return field in self.model_fields_set


class Scenario(BaseModel):
    """One declared call and its expectations."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    call: CallSpec
    args: ArgList | None = None
    expected: ExpectationSpec


def validate_scenario(value: Any, index: int | None = None) -> Scenario:
    """Return ``value`` as a :class:`Scenario`, raising on malformed input.

    Raises
    ------
    MalformedScenarioError
        If ``value`` is missing ``name``/``call``/``expected`` or any part of
        it fails validation.
    """
    if isinstance(value, Scenario):
        return value
    try:
        return Scenario.model_validate(value)
    except ValidationError as exc:
        raise MalformedScenarioError(index, exc, value) from exc


__all__ = ["ArgList", "CallSpec", "ExpectationSpec", "Scenario", "validate_scenario"]
