"""Shared types for the tenet engine."""

from enum import Enum


class Status(Enum):
    """Terminal status of an invocation."""

    COMPLETED = "completed"
    RAISED = "raised"


class RunnerState(Enum):
    """Scenario runner lifecycle, one forward pass."""

    NOT_STARTED = "not_started"
    EXECUTED = "executed"
    CHECKED_STREAMS = "checked_streams"
    CHECKED_STATUS = "checked_status"
    CHECKED_RETURN = "checked_return"
    DONE = "done"
