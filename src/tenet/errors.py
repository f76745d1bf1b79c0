"""Framework error types.

Errors raised by the code under test are never represented here; they are
recorded on the outcome record and checked like any other result.
"""

from __future__ import annotations

from typing import Any


class TenetError(Exception):
    """Base class for framework-usage errors."""


class MalformedScenarioError(TenetError, ValueError):
    """Raised when a declared scenario is not well formed (developer error)."""

    def __init__(self, index: int | None, cause: Exception, scenario: Any = None) -> None:
        self.index = index
        self.cause = cause
        self.scenario = scenario

        where = f"Scenario #{index}" if index is not None else "Scenario"
        name = _scenario_name(scenario)
        if name:
            where += f" ({name!r})"
        super().__init__(f"{where} is malformed: {cause}")


class RunnerStateError(TenetError, RuntimeError):
    """Raised when a runner phase is invoked out of order."""


class ConfigError(TenetError):
    """Raised when tenet configuration is invalid."""


def _scenario_name(scenario: Any) -> str | None:
    if isinstance(scenario, dict):
        name = scenario.get("name")
    else:
        name = getattr(scenario, "name", None)
    return name if isinstance(name, str) and name else None
