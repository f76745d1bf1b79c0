"""Outcome record types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tenet.types import Status


@dataclass(frozen=True, slots=True)
class OutcomeRecord:
    """What actually happened during one invocation.

    Exactly one of ``return_value``/``error`` is meaningful, selected by
    ``status``. Captured stream text is always present, possibly empty.
    """

    status: Status
    return_value: Any = None
    error: BaseException | None = None
    stdout: str = ""
    stderr: str = ""

    @classmethod
    def completed(cls, value: Any, stdout: str = "", stderr: str = "") -> OutcomeRecord:
        return cls(Status.COMPLETED, return_value=value, stdout=stdout, stderr=stderr)

    @classmethod
    def raised(cls, error: BaseException, stdout: str = "", stderr: str = "") -> OutcomeRecord:
        return cls(Status.RAISED, error=error, stdout=stdout, stderr=stderr)

    @property
    def lived(self) -> bool:
        return self.status is Status.COMPLETED

    @property
    def died(self) -> bool:
        return self.status is Status.RAISED

    @property
    def error_type_name(self) -> str:
        """Class name of the recorded error, or ``"nothing"`` if none was raised."""
        if self.error is None:
            return "nothing"
        return type(self.error).__name__
