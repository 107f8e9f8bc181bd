from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Sequence

from . import metrics
from .profile import Profile
from .profiler import Profiler
from .profilers import (
    FixedRateWallclockProfiler,
    JiffyCpuProfiler,
    PerfectCpuProfiler,
    PerfectWallclockProfiler,
)
from .trace import ExecutionTrace


LOG = logging.getLogger(__name__)

ProfilerFactory = Callable[[], Profiler]


@dataclass(frozen=True, slots=True)
class NamedProfiler:
    """A profiler paired with the exact oracle its bias is measured against."""

    name: str
    factory: ProfilerFactory
    reference: ProfilerFactory = PerfectWallclockProfiler


@dataclass(slots=True)
class EvaluationOutcome:
    name: str
    profile: Profile
    per_stack: list[metrics.StackBias]
    aggregate: metrics.AggregateBias


def default_profilers() -> list[NamedProfiler]:
    return [
        NamedProfiler("Perfect Wallclock Profiler", PerfectWallclockProfiler),
        NamedProfiler("Perfect CPU Profiler", PerfectCpuProfiler, reference=PerfectCpuProfiler),
        NamedProfiler("Node.js Wallclock Profiler", FixedRateWallclockProfiler),
        NamedProfiler("Go CPU Profiler", JiffyCpuProfiler, reference=PerfectCpuProfiler),
    ]


def evaluate_profiler(
    named: NamedProfiler,
    trace: ExecutionTrace,
    *,
    reference: Profile | None = None,
) -> EvaluationOutcome:
    """Run one profiler, sort its profile and measure it against ``reference``.

    Without a reference the profile is compared with what ``named.reference``
    reports for the same trace.
    """

    if reference is None:
        reference = named.reference().profile(trace)
    profile = named.factory().profile(trace)
    profile.sort()
    LOG.debug("%s produced %d stacks", named.name, len(profile))
    per_stack = metrics.build_stack_bias(profile, reference)
    aggregate = metrics.summarise(per_stack)
    return EvaluationOutcome(name=named.name, profile=profile, per_stack=per_stack, aggregate=aggregate)


def evaluate_suite(
    profilers: Sequence[NamedProfiler],
    trace: ExecutionTrace,
    *,
    reference: Profile | None = None,
) -> list[EvaluationOutcome]:
    return [evaluate_profiler(named, trace, reference=reference) for named in profilers]
