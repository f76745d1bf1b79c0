import io

import pytest
from rich.console import Console

from tenet.reports import ConsoleReporter, MemoryReporter, Reporter, ReportEvent


@pytest.fixture
def output():
    return io.StringIO()


def console_reporter(output, verbosity=0):
    console = Console(file=output, highlight=False, color_system=None, width=200)
    return ConsoleReporter(console=console, verbosity=verbosity)


def run_two_groups(reporter):
    reporter.plan(2)
    reporter.begin_group("first", 1)
    reporter.report(True, "first - return value")
    reporter.note("first: calling Calculator.add")
    reporter.end_group()
    reporter.begin_group("second", 1)
    reporter.report(False, "second - return value", "expected 9, got 8")
    reporter.end_group()
    reporter.finish()


class TestConsoleReporter:
    def test_satisfies_protocol(self, output):
        assert isinstance(console_reporter(output), Reporter)

    def test_tap_style_output(self, output):
        reporter = console_reporter(output)

        run_two_groups(reporter)

        assert output.getvalue().splitlines() == [
            "1..2",
            "# Subtest: first",
            "    1..1",
            "    ok 1 - first - return value",
            "ok 1 - first",
            "# Subtest: second",
            "    1..1",
            "    not ok 1 - second - return value",
            "    #   expected 9, got 8",
            "not ok 2 - second",
            "# 1 of 2 checks failed",
        ]
        assert (reporter.passed, reporter.failed) == (1, 1)

    def test_notes_need_verbosity(self, output):
        run_two_groups(console_reporter(output, verbosity=1))

        assert "    # first: calling Calculator.add" in output.getvalue().splitlines()

    def test_quiet_hides_passing_checks(self, output):
        run_two_groups(console_reporter(output, verbosity=-1))

        text = output.getvalue()
        assert "ok 1 - first" not in text
        assert "not ok 1 - second - return value" in text

    def test_plan_mismatch_fails_group(self, output):
        reporter = console_reporter(output)
        reporter.plan(1)
        reporter.begin_group("short", 2)
        reporter.report(True, "short - lived")
        reporter.end_group()
        reporter.finish()

        lines = output.getvalue().splitlines()
        assert "    # planned 2 checks but ran 1" in lines
        assert "not ok 1 - short" in lines

    def test_all_passed_summary(self, output):
        reporter = console_reporter(output)
        reporter.plan(0)
        reporter.finish()

        assert output.getvalue().splitlines()[-1] == "# all 0 checks passed"

    def test_markup_in_descriptions_is_escaped(self, output):
        reporter = console_reporter(output)
        reporter.plan(1)
        reporter.begin_group("[bold]x[/bold]", 0)
        reporter.end_group()

        assert "ok 1 - [bold]x[/bold]" in output.getvalue()


class TestMemoryReporter:
    def test_records_events_in_order(self):
        reporter = MemoryReporter()

        run_two_groups(reporter)

        assert [e.kind for e in reporter.events] == [
            "plan",
            "begin_group",
            "report",
            "note",
            "end_group",
            "begin_group",
            "report",
            "end_group",
            "finish",
        ]
        assert reporter.events[6] == ReportEvent("report", (False, "second - return value", "expected 9, got 8"))

    def test_views(self):
        reporter = MemoryReporter()

        run_two_groups(reporter)

        assert reporter.checks == [(True, "first - return value"), (False, "second - return value")]
        assert reporter.notes == ["first: calling Calculator.add"]
        assert reporter.groups == [("first", 1), ("second", 1)]
        assert reporter.failed == 1

    def test_clear(self):
        reporter = MemoryReporter()
        reporter.plan(1)

        reporter.clear()

        assert reporter.events == []
