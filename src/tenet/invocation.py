"""Construct a target and call a method on it by name."""

from __future__ import annotations

from typing import Any

from tenet.scenario import ArgList, CallSpec


class Invocation:
    """A target type, its constructor arguments, a method name and call arguments.

    Invocation performs no error handling: anything raised while constructing
    the target or calling the method propagates to the caller. Output written
    by the invoked code is not captured here either.
    """

    def __init__(
        self,
        target: type,
        method: str,
        construct: ArgList | None = None,
        args: ArgList | None = None,
    ) -> None:
        self.target = target
        self.method = method
        self.construct_args = construct if construct is not None else ArgList()
        self.args = args if args is not None else ArgList()

    @classmethod
    def from_call(cls, call: CallSpec, args: ArgList | None = None) -> Invocation:
        return cls(call.target, call.method, construct=call.construct_args, args=args)

    def construct(self) -> Any:
        """Instantiate the target with the constructor arguments."""
        return self.target(*self.construct_args.args, **self.construct_args.kwargs)

    def call(self) -> Any:
        """Construct a fresh instance and invoke the method on it."""
        instance = self.construct()
        bound = getattr(instance, self.method)
        return bound(*self.args.args, **self.args.kwargs)

    def describe(self) -> str:
        return f"{self.target.__qualname__}.{self.method}"

    def __repr__(self) -> str:
        return f"Invocation({self.describe()}, construct={self.construct_args!r}, args={self.args!r})"
