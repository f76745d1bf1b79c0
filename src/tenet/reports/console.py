"""Console reporter with TAP-style output."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from tenet.reports.base import Reporter


INDENT = "    "


@dataclass
class _Group:
    name: str
    planned: int
    count: int = 0
    failed: int = 0


class ConsoleReporter(Reporter):
    """Print checks as they run, one ``ok``/``not ok`` line per check.

    Each scenario is printed as an indented subtest with its own plan line and
    summarised by a single line at the level above. Verbosity below zero hides
    passing checks; verbosity above zero also prints notes.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console(highlight=False)
        self.verbosity = verbosity
        self.passed = 0
        self.failed = 0
        self._top = _Group(name="", planned=0)
        self._stack: list[_Group] = []

    @property
    def _current(self) -> _Group:
        return self._stack[-1] if self._stack else self._top

    def _indent(self) -> str:
        return INDENT * len(self._stack)

    def _line(self, text: str) -> None:
        self.console.print(f"{self._indent()}{text}")

    def _result_line(self, group: _Group, passed: bool, description: str) -> None:
        group.count += 1
        if not passed:
            group.failed += 1
        if passed and self.verbosity < 0:
            return
        status = "[green]ok[/green]" if passed else "[red]not ok[/red]"
        self._line(f"{status} {group.count} - {escape(description)}")

    def plan(self, count: int) -> None:
        self._top.planned = count
        self._line(f"1..{count}")

    def begin_group(self, name: str, planned_count: int) -> None:
        if self.verbosity >= 0:
            self._line(f"[dim]# Subtest: {escape(name)}[/dim]")
        self._stack.append(_Group(name=name, planned=planned_count))
        if self.verbosity >= 0:
            self._line(f"1..{planned_count}")

    def report(self, passed: bool, description: str, message: str | None = None) -> None:
        if passed:
            self.passed += 1
        else:
            self.failed += 1
        self._result_line(self._current, passed, description)
        if not passed and message:
            for line in message.splitlines():
                self._line(f"[red]#   {escape(line)}[/red]")

    def note(self, text: str) -> None:
        if self.verbosity < 1:
            return
        for line in text.splitlines():
            self._line(f"[dim]# {escape(line)}[/dim]")

    def end_group(self) -> None:
        group = self._stack.pop()
        if group.count != group.planned:
            self.console.print(
                f"{self._indent()}{INDENT}[yellow]# planned {group.planned} checks but ran {group.count}[/yellow]"
            )
            group.failed += 1
        self._result_line(self._current, group.failed == 0, group.name)

    def finish(self) -> None:
        top = self._top
        if top.count != top.planned:
            self.console.print(f"[yellow]# planned {top.planned} scenarios but ran {top.count}[/yellow]")
        total = self.passed + self.failed
        if self.failed:
            self.console.print(f"[bold red]# {self.failed} of {total} checks failed[/bold red]")
        else:
            self.console.print(f"[bold green]# all {total} checks passed[/bold green]")
