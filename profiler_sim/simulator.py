from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from . import evaluation, workload
from .duration import SECOND
from .stack import StackTrace
from .trace import ExecutionTrace


@dataclass(slots=True)
class SimulationResult:
    trace: ExecutionTrace
    outcomes: list[evaluation.EvaluationOutcome]


@dataclass(slots=True)
class SimulationConfig:
    duration: int = 100 * SECOND
    pool: list[StackTrace] = field(default_factory=workload.demo_pool)

    def __post_init__(self) -> None:
        if self.duration < 0:
            msg = "duration cannot be negative"
            raise ValueError(msg)
        if not self.pool:
            msg = "pool must contain at least one stack trace"
            raise ValueError(msg)


class Simulation:
    """Builds one trace and runs every profiler over it."""

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()

    def build_trace(self) -> ExecutionTrace:
        return workload.repeat(self.config.duration, self.config.pool)

    def run(self, profilers: Sequence[evaluation.NamedProfiler] | None = None) -> SimulationResult:
        if profilers is None:
            profilers = evaluation.default_profilers()
        trace = self.build_trace()
        outcomes = evaluation.evaluate_suite(profilers, trace)
        return SimulationResult(trace=trace, outcomes=outcomes)
