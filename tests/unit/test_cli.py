"""Tests for the tenet command line."""

import sys

import pytest

from tenet.cli import main


@pytest.fixture(autouse=True)
def _cli_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "path", list(sys.path))


def run_cli(*argv):
    with pytest.raises(SystemExit) as excinfo:
        main(list(argv))
    return excinfo.value.code


class TestRunCommand:
    def test_passing_scenarios_exit_zero(self, capsys):
        assert run_cli("run", "subjects:SCENARIOS") == 0

        out = capsys.readouterr().out
        assert "ok 1 - add" in out
        assert "ok 2 - shout" in out
        assert "HI" not in out

    def test_failing_scenarios_exit_one(self, capsys):
        assert run_cli("run", "subjects:FAILING_SCENARIOS") == 1

        assert "not ok 1 - wrong - return value" in capsys.readouterr().out

    def test_callable_target(self):
        assert run_cli("run", "subjects:make_scenarios", "subjects:FAILING_SCENARIOS") == 1

    def test_show_output_passes_output_through(self, capsys):
        assert run_cli("run", "-s", "subjects:SCENARIOS") == 0

        assert "HI\n" in capsys.readouterr().out

    def test_quiet_hides_passing_checks(self, capsys):
        assert run_cli("run", "-q", "subjects:SCENARIOS") == 0

        assert "ok 1 - add" not in capsys.readouterr().out

    def test_named_reporter(self, capsys):
        assert run_cli("run", "--reporter", "MemoryReporter", "subjects:SCENARIOS") == 0

        assert capsys.readouterr().out == ""

    def test_debug_prints_notes(self, capsys):
        assert run_cli("run", "--debug", "subjects:SCENARIOS") == 0

        assert "add: calling Calculator.add" in capsys.readouterr().out


class TestUsageErrors:
    def test_malformed_scenario(self, capsys):
        assert run_cli("run", "subjects:MALFORMED") == 2

        assert "malformed" in capsys.readouterr().out

    def test_missing_attribute(self):
        assert run_cli("run", "subjects:NOPE") == 2

    def test_target_is_not_a_sequence(self):
        assert run_cli("run", "subjects:Calculator") == 2

    def test_unknown_reporter(self):
        assert run_cli("run", "--reporter", "Nope", "subjects:SCENARIOS") == 2

    def test_bad_environment(self, monkeypatch):
        monkeypatch.setenv("TENET_DEBUG", "maybe")

        assert run_cli("run", "subjects:SCENARIOS") == 2

    def test_no_command_prints_help(self, capsys):
        assert run_cli() == 0

        assert "usage: tenet" in capsys.readouterr().out
