"""In-memory reporter that records every call for later inspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tenet.reports.base import Reporter


@dataclass(frozen=True, slots=True)
class ReportEvent:
    """One reporter call: ``kind`` is the method name, ``args`` its arguments."""

    kind: str
    args: tuple[Any, ...] = ()


@dataclass
class MemoryReporter(Reporter):
    """Reporter that keeps events in a list instead of printing them."""

    events: list[ReportEvent] = field(default_factory=list)

    def plan(self, count: int) -> None:
        self.events.append(ReportEvent("plan", (count,)))

    def begin_group(self, name: str, planned_count: int) -> None:
        self.events.append(ReportEvent("begin_group", (name, planned_count)))

    def report(self, passed: bool, description: str, message: str | None = None) -> None:
        self.events.append(ReportEvent("report", (passed, description, message)))

    def note(self, text: str) -> None:
        self.events.append(ReportEvent("note", (text,)))

    def end_group(self) -> None:
        self.events.append(ReportEvent("end_group"))

    def finish(self) -> None:
        self.events.append(ReportEvent("finish"))

    @property
    def checks(self) -> list[tuple[bool, str]]:
        """``(passed, description)`` for every reported check, in order."""
        return [(e.args[0], e.args[1]) for e in self.events if e.kind == "report"]

    @property
    def notes(self) -> list[str]:
        return [e.args[0] for e in self.events if e.kind == "note"]

    @property
    def groups(self) -> list[tuple[str, int]]:
        return [(e.args[0], e.args[1]) for e in self.events if e.kind == "begin_group"]

    @property
    def failed(self) -> int:
        return sum(1 for passed, _ in self.checks if not passed)

    def clear(self) -> None:
        self.events.clear()
