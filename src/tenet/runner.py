"""Scenario execution and expectation checking.

One :class:`ScenarioRunner` executes one scenario in a single forward pass:

    NOT_STARTED -> EXECUTED -> CHECKED_STREAMS -> CHECKED_STATUS -> CHECKED_RETURN -> DONE

Errors raised by the code under test are recorded on the
:class:`~tenet.outcome.OutcomeRecord` and checked; expectation mismatches are
reported to the reporter. Neither is ever raised out of the runner.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from tenet.assertions import CheckResult, assert_is_instance, assert_true, type_name
from tenet.config import TenetConfig, load_config
from tenet.context import capture_output
from tenet.errors import RunnerStateError
from tenet.expectations import STREAMS, ExpectationSet
from tenet.invocation import Invocation
from tenet.outcome import OutcomeRecord
from tenet.reports import Reporter, resolve_reporter
from tenet.scenario import Scenario, validate_scenario
from tenet.types import RunnerState

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """Outcome and check results of one scenario run."""

    name: str
    outcome: OutcomeRecord
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)


class ScenarioRunner:
    """Runs a single scenario against a reporter.

    A runner is single-use: once :meth:`run` (or the last phase) has completed
    it refuses to run again.
    """

    def __init__(self, scenario: Scenario, reporter: Reporter, config: TenetConfig | None = None) -> None:
        self.scenario = scenario
        self.reporter = reporter
        self.config = config or TenetConfig()
        self.invocation = Invocation.from_call(scenario.call)
        self.expectations = ExpectationSet(scenario.expected)
        self.state = RunnerState.NOT_STARTED
        self.outcome: OutcomeRecord | None = None
        self.checks: list[CheckResult] = []

    @property
    def name(self) -> str:
        return self.scenario.name

    def _advance(self, expected: RunnerState, to: RunnerState) -> None:
        if self.state is not expected:
            raise RunnerStateError(
                f"Scenario {self.name!r}: cannot enter {to.value} from {self.state.value} "
                f"(expected {expected.value})"
            )
        self.state = to

    def _emit(self, result: CheckResult) -> None:
        self.checks.append(result)
        self.reporter.report(result.passed, result.description, result.message)

    def _recorded(self) -> OutcomeRecord:
        if self.outcome is None:
            raise RunnerStateError(f"Scenario {self.name!r}: no outcome recorded before execute()")
        return self.outcome

    def execute(self) -> OutcomeRecord:
        """Run the invocation under output capture and record what happened."""
        self._advance(RunnerState.NOT_STARTED, RunnerState.EXECUTED)

        if self.scenario.args is not None:
            self.invocation.args = self.scenario.args

        logger.debug("Scenario %r: calling %s", self.name, self.invocation.describe())
        if self.config.debug:
            self.reporter.note(f"{self.name}: calling {self.invocation.describe()}")

        value: Any = None
        error: BaseException | None = None
        with capture_output(swallow=self.config.swallow_output) as buffer:
            try:
                value = self.invocation.call()
            except BaseException as exc:  # SystemExit and KeyboardInterrupt included
                error = exc
        stdout, stderr = buffer.getvalue()

        if error is None:
            self.outcome = OutcomeRecord.completed(value, stdout=stdout, stderr=stderr)
        else:
            logger.debug("Scenario %r: %s raised %r", self.name, self.invocation.describe(), error)
            self.outcome = OutcomeRecord.raised(error, stdout=stdout, stderr=stderr)
        return self.outcome

    def test_streams(self) -> None:
        """Check captured stdout and stderr against their expectations."""
        self._advance(RunnerState.EXECUTED, RunnerState.CHECKED_STREAMS)
        outcome = self._recorded()

        for stream in STREAMS:
            expected = self.expectations.stream(stream)
            if expected is None:
                continue
            self._emit(expected.evaluate(getattr(outcome, stream), f"{self.name} - {stream}"))

    def test_status(self) -> None:
        """Check whether the call lived or died, and what it threw."""
        self._advance(RunnerState.CHECKED_STREAMS, RunnerState.CHECKED_STATUS)
        outcome = self._recorded()

        if self.expectations.lives:
            self._emit(
                assert_true(
                    outcome.lived,
                    f"{self.name} lived",
                    message=f"died with {outcome.error_type_name}: {outcome.error}",
                )
            )
            return

        if self.expectations.dies:
            self._emit(assert_true(outcome.died, f"{self.name} - died", message="completed without raising"))

        throws = self.expectations.throws
        if throws is not None:
            description = f"{self.name} - throws {type_name(throws)} (got {outcome.error_type_name})"
            if outcome.died:
                self._emit(assert_is_instance(outcome.error, throws, description))
            else:
                self._emit(assert_true(False, description, message="completed without raising"))

    def test_return_value(self) -> None:
        """Check the return value and the post-call state of the arguments."""
        self._advance(RunnerState.CHECKED_STATUS, RunnerState.CHECKED_RETURN)
        outcome = self._recorded()

        expected = self.expectations.return_value
        if expected is not None:
            description = f"{self.name} - return value"
            if expected.is_comparator:
                description += f": {outcome.return_value!r} {expected.value.describe()}"
            result = expected.evaluate(outcome.return_value, description)
            if not result.passed and outcome.died:
                result = result.model_copy(
                    update={"message": f"call raised {outcome.error_type_name}: {outcome.error}"}
                )
            self._emit(result)
        elif self.config.debug and _has_value(outcome.return_value):
            self.reporter.note(f"{self.name}: untested return value {outcome.return_value!r}")

        mutates = self.expectations.mutates
        if mutates is not None:
            self._emit(mutates.evaluate(self.invocation.args.state(), f"{self.name} - mutates"))

    def run(self) -> ScenarioResult:
        """Execute the scenario and run every check phase inside its report group."""
        if self.state is not RunnerState.NOT_STARTED:
            raise RunnerStateError(f"Scenario {self.name!r}: runner already used ({self.state.value})")

        planned = self.expectations.planned_count()
        if planned == 0:
            logger.warning("Scenario %r declares no expectations", self.name)

        self.reporter.begin_group(self.name, planned)
        try:
            self.execute()
            self.test_streams()
            self.test_status()
            self.test_return_value()
        finally:
            self.reporter.end_group()
        self._advance(RunnerState.CHECKED_RETURN, RunnerState.DONE)

        result = ScenarioResult(name=self.name, outcome=self._recorded(), checks=list(self.checks))
        logger.debug(
            "Scenario %r finished: %d/%d checks passed",
            self.name,
            sum(1 for c in result.checks if c.passed),
            len(result.checks),
        )
        return result


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    try:
        return len(value) > 0
    except TypeError:
        return True


def _validate_all(scenarios: Iterable[Any]) -> list[Scenario]:
    if isinstance(scenarios, (str, bytes, Mapping)) or not isinstance(scenarios, Iterable):
        raise TypeError(f"Expected a sequence of scenarios, got {type(scenarios).__name__}")
    return [validate_scenario(scenario, index=i) for i, scenario in enumerate(scenarios)]


def default_reporter(config: TenetConfig) -> Reporter:
    """Instantiate the reporter named by the configuration."""
    return resolve_reporter(config.reporter, **config.reporter_options)


def run_scenarios(
    scenarios: Iterable[Scenario | Mapping[str, Any]],
    reporter: Reporter | None = None,
    config: TenetConfig | None = None,
) -> list[ScenarioResult]:
    """Validate every scenario, then run them one after another.

    Raises:
        MalformedScenarioError: If any element is not a well-formed scenario.
            Raised before any scenario runs.
    """
    validated = _validate_all(scenarios)
    config = config or load_config()
    reporter = reporter if reporter is not None else default_reporter(config)

    reporter.plan(len(validated))
    results = [ScenarioRunner(scenario, reporter, config).run() for scenario in validated]
    reporter.finish()
    return results


def declare(
    scenarios: Iterable[Scenario | Mapping[str, Any]],
    reporter: Reporter | None = None,
    config: TenetConfig | None = None,
) -> None:
    """Declare and run a batch of scenarios, reporting every check."""
    run_scenarios(scenarios, reporter=reporter, config=config)


__all__ = ["ScenarioResult", "ScenarioRunner", "declare", "default_reporter", "run_scenarios"]
