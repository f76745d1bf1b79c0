"""Reporting module for tenet check output."""

from tenet.reports.base import Reporter
from tenet.reports.console import ConsoleReporter
from tenet.reports.memory import MemoryReporter, ReportEvent
from tenet.reports.registry import (
    clear_reporter_registry,
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
)


register_builtin(ConsoleReporter)
register_builtin(MemoryReporter)

__all__ = [
    "ConsoleReporter",
    "MemoryReporter",
    "ReportEvent",
    "Reporter",
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
]
