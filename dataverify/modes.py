from enum import Enum


class ValidationMode(str, Enum):
    """Validation accumulation strategy."""
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class EvaluationState(str, Enum):
    """Lifecycle of one orchestrator."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
