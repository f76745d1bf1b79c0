"""tenet - declarative test-execution engine."""

from .comparators import Comparator
from .config import TenetConfig, load_config
from .errors import ConfigError, MalformedScenarioError, RunnerStateError, TenetError
from .expectations import ExpectationSet
from .invocation import Invocation
from .outcome import OutcomeRecord
from .reports import ConsoleReporter, MemoryReporter, Reporter
from .runner import ScenarioResult, ScenarioRunner, declare, run_scenarios
from .scenario import ArgList, CallSpec, ExpectationSpec, Scenario
from .suite import Suite
from .types import RunnerState, Status
from .version import __version__


__all__ = [
    # Scenario model
    "ArgList",
    "CallSpec",
    "ExpectationSpec",
    "Scenario",
    "Comparator",
    # Execution
    "Invocation",
    "ExpectationSet",
    "OutcomeRecord",
    "ScenarioRunner",
    "ScenarioResult",
    "RunnerState",
    "Status",
    "declare",
    "run_scenarios",
    "Suite",
    # Reporting
    "Reporter",
    "ConsoleReporter",
    "MemoryReporter",
    # Configuration and errors
    "TenetConfig",
    "load_config",
    "TenetError",
    "MalformedScenarioError",
    "RunnerStateError",
    "ConfigError",
    "__version__",
]
