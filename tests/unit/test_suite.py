import pytest

from subjects import Calculator, Point
from tenet.errors import MalformedScenarioError
from tenet.scenario import CallSpec, ExpectationSpec, Scenario
from tenet.suite import Suite


class TestSuite:
    def test_fills_unset_call_fields(self):
        suite = Suite(type=Calculator, construct=[5], method="add")

        (scenario,) = suite.scenarios([{"name": "add", "args": [3], "expected": {"return_value": 8}}])

        assert scenario.call.target is Calculator
        assert scenario.call.construct_args.args == [5]
        assert scenario.call.method == "add"

    def test_explicit_fields_win(self):
        suite = Suite(type=Calculator, method="add")

        (scenario,) = suite.scenarios(
            [{"name": "sub", "call": {"type": Point, "method": "other"}, "expected": {}}]
        )

        assert scenario.call.target is Point
        assert scenario.call.method == "other"

    def test_field_name_counts_as_set(self):
        suite = Suite(type=Point)

        (scenario,) = suite.scenarios(
            [{"name": "s", "call": {"target": Calculator, "method": "add"}, "expected": {}}]
        )

        assert scenario.call.target is Calculator

    def test_does_not_mutate_input(self):
        raw = {"name": "add", "call": {"method": "add"}, "expected": {}}

        Suite(type=Calculator).scenarios([raw])

        assert raw == {"name": "add", "call": {"method": "add"}, "expected": {}}

    def test_scenarios_pass_through(self):
        scenario = Scenario(name="a", call=CallSpec(target=Calculator, method="add"), expected=ExpectationSpec())

        assert Suite(type=Point).scenarios([scenario]) == [scenario]

    def test_still_malformed_after_filling(self):
        with pytest.raises(MalformedScenarioError) as excinfo:
            Suite(type=Calculator).scenarios([{"name": "ok", "call": {"method": "add"}, "expected": {}}, {"name": "x", "expected": {}}])

        assert excinfo.value.index == 1

    def test_declare_runs_filled_scenarios(self, reporter, config):
        suite = Suite(type=Calculator, construct=[5], method="add")

        suite.declare(
            [
                {"name": "three", "args": [3], "expected": {"return_value": 8}},
                {"name": "four", "args": [4], "expected": {"return_value": 9}},
            ],
            reporter=reporter,
            config=config,
        )

        assert reporter.checks == [(True, "three - return value"), (True, "four - return value")]
