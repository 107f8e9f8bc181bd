from __future__ import annotations

import logging

from .duration import MILLISECOND, SECOND
from .profile import Profile
from .profiler import Profiler
from .trace import ExecutionTrace


LOG = logging.getLogger(__name__)


class PerfectWallclockProfiler(Profiler):
    """Oracle that records every segment with its exact duration."""

    def profile(self, trace: ExecutionTrace) -> Profile:
        result = Profile()
        for segment in trace:
            result.add(segment)
        return result


class PerfectCpuProfiler(Profiler):
    """Oracle restricted to on-CPU segments."""

    def profile(self, trace: ExecutionTrace) -> Profile:
        result = Profile()
        for segment in trace:
            if not segment.cpu:
                continue
            result.add(segment)
        return result


class FixedRateWallclockProfiler(Profiler):
    """Timer firing every ``PERIOD`` of wallclock time, like Node.js' sampler.

    Each tick that lands on an on-CPU segment is charged one full period no
    matter how long the segment really ran. Ticks on off-CPU segments are
    dropped.
    """

    HZ = 99
    PERIOD = SECOND // HZ

    def profile(self, trace: ExecutionTrace) -> Profile:
        result = Profile()
        offset = 0
        ticks = 0
        while True:
            offset += self.PERIOD
            segment = trace.sample(offset)
            if segment is None:
                break
            ticks += 1
            if segment.cpu:
                result.add(segment.with_duration(self.PERIOD))
        LOG.debug("Fixed-rate sampler fired %d times, kept %d stacks", ticks, len(result))
        return result


class JiffyCpuProfiler(Profiler):
    """CPU-time sampler driven by kernel tick accounting, like Go's setitimer profiler.

    CPU time is credited in ``JIFFY`` sized chunks and a sample fires each time
    the credited time crosses ``PERIOD``. The credit carries across segments,
    since neither boundary lines up with stack transitions.
    """

    JIFFY = 4 * MILLISECOND
    PERIOD = SECOND // 100

    def profile(self, trace: ExecutionTrace) -> Profile:
        result = Profile()
        credited = 0
        for segment in trace:
            if not segment.cpu:
                continue
            request = segment.duration
            while request > 0:
                chunk = min(request, self.JIFFY)
                credited += chunk
                request -= chunk
                if credited >= self.PERIOD:
                    result.add(segment.with_duration(self.PERIOD))
                    credited -= self.PERIOD
        LOG.debug("Jiffy sampler left %dns of uncharged CPU time", credited)
        return result
