"""Base reporter protocol for tenet check output."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the interface for check reporters.

    A run calls ``plan`` once with the number of scenarios, then for each
    scenario ``begin_group``, one ``report`` per executed check, any number of
    ``note`` calls, and ``end_group``. ``finish`` closes the run.
    """

    def plan(self, count: int) -> None:
        """Called once before any scenario runs."""
        ...

    def begin_group(self, name: str, planned_count: int) -> None:
        """Called when a scenario starts, with the number of checks it will report."""
        ...

    def report(self, passed: bool, description: str, message: str | None = None) -> None:
        """Called once per executed check. ``message`` carries failure diagnostics."""
        ...

    def note(self, text: str) -> None:
        """Informational output that never affects pass/fail."""
        ...

    def end_group(self) -> None:
        """Called when a scenario's checks are complete."""
        ...

    def finish(self) -> None:
        """Called after the last scenario."""
        ...
