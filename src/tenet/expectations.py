"""Normalized read-only view over a scenario's expectations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tenet.assertions import CheckResult, assert_equal, assert_true
from tenet.comparators import Comparator
from tenet.scenario import ExpectationSpec


STREAMS = ("stdout", "stderr")


@dataclass(frozen=True, slots=True)
class Expected:
    """A declared expected value, either a literal or a :class:`Comparator`."""

    value: Any

    @property
    def is_comparator(self) -> bool:
        return isinstance(self.value, Comparator)

    def evaluate(self, actual: Any, description: str) -> CheckResult:
        """Compare actual against this expectation.

        Literals use structural equality; comparators use ``compare``.
        """
        if not self.is_comparator:
            return assert_equal(actual, self.value, description)

        comparator: Comparator = self.value
        try:
            passed = comparator.compare(actual)
        except Exception as exc:
            return assert_true(
                False,
                description,
                message=f"comparator {comparator.name!r} raised {type(exc).__name__}: {exc}",
            )
        return assert_true(
            passed,
            description,
            message=f"{actual!r} is not {comparator.describe()}",
        )


class ExpectationSet:
    """Accessors over an :class:`ExpectationSpec`.

    A field is present only when it was set explicitly on the :class:`ExpectationSpec`.
    """

    def __init__(self, spec: ExpectationSpec) -> None:
        self.spec = spec

    def get(self, field: str) -> Expected | None:
        if not self.spec.is_declared(field):
            return None
        return Expected(getattr(self.spec, field))

    @property
    def return_value(self) -> Expected | None:
        return self.get("return_value")

    @property
    def mutates(self) -> Expected | None:
        return self.get("mutates")

    def stream(self, name: str) -> Expected | None:
        if name not in STREAMS:
            raise ValueError(f"Unknown stream: {name}")
        return self.get(name)

    @property
    def lives(self) -> bool:
        return self.spec.lives is True

    @property
    def dies(self) -> bool:
        return self.spec.dies is True

    @property
    def throws(self) -> type[BaseException] | tuple[type[BaseException], ...] | str | None:
        return self.spec.throws

    def planned_count(self) -> int:
        """Number of checks the runner will report for these expectations."""
        count = sum(1 for name in STREAMS if self.spec.is_declared(name))
        if self.lives:
            count += 1
        else:
            count += int(self.dies) + int(self.throws is not None)
        if self.return_value is not None:
            count += 1
        if self.mutates is not None:
            count += 1
        return count

    def __repr__(self) -> str:
        declared = ", ".join(sorted(self.spec.model_fields_set)) or "nothing"
        return f"ExpectationSet({declared})"
