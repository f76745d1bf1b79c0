"""Shared call defaults for a batch of scenarios.

    >>> suite = Suite(type=Calculator, construct=[5])
    >>> suite.declare([
    ...     {"name": "add", "call": {"method": "add"}, "args": [3], "expected": {"return_value": 8}},
    ...     {"name": "sub", "call": {"method": "sub"}, "args": [3], "expected": {"return_value": 2}},
    ... ])
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from tenet.config import TenetConfig
from tenet.reports import Reporter
from tenet.runner import ScenarioResult, declare, run_scenarios
from tenet.scenario import Scenario, validate_scenario


# declared key -> field name also accepted for it
_DEFAULTED = {"type": "target", "construct": "construct_args", "method": "method"}


class Suite:
    """Fill unset ``call.type``/``call.construct``/``call.method`` from defaults.

    Only raw mappings can be missing call fields; :class:`Scenario` instances
    are already complete and pass through untouched.
    """

    def __init__(self, type: type | None = None, method: str | None = None, construct: Any = None) -> None:
        self.defaults: dict[str, Any] = {
            key: value
            for key, value in (("type", type), ("method", method), ("construct", construct))
            if value is not None
        }

    def fill(self, scenario: Scenario | Mapping[str, Any]) -> Scenario | dict[str, Any]:
        if isinstance(scenario, Scenario) or not isinstance(scenario, Mapping):
            return scenario
        filled = dict(scenario)
        call = filled.get("call")
        if call is None:
            call = {}
        if isinstance(call, Mapping):
            call = dict(call)
            for key, field_name in _DEFAULTED.items():
                if call.get(key) is None and call.get(field_name) is None and key in self.defaults:
                    call[key] = self.defaults[key]
            filled["call"] = call
        return filled

    def scenarios(self, scenarios: Iterable[Scenario | Mapping[str, Any]]) -> list[Scenario]:
        """Apply the defaults and validate every scenario.

        Raises:
            MalformedScenarioError: If a scenario is still malformed after filling.
        """
        return [validate_scenario(self.fill(s), index=i) for i, s in enumerate(scenarios)]

    def run(
        self,
        scenarios: Iterable[Scenario | Mapping[str, Any]],
        reporter: Reporter | None = None,
        config: TenetConfig | None = None,
    ) -> list[ScenarioResult]:
        return run_scenarios(self.scenarios(scenarios), reporter=reporter, config=config)

    def declare(
        self,
        scenarios: Iterable[Scenario | Mapping[str, Any]],
        reporter: Reporter | None = None,
        config: TenetConfig | None = None,
    ) -> None:
        declare(self.scenarios(scenarios), reporter=reporter, config=config)
