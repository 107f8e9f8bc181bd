import pytest

from profiler_sim import workload
from profiler_sim.duration import MILLISECOND
from profiler_sim.duration import SECOND
from profiler_sim.profilers import FixedRateWallclockProfiler
from profiler_sim.profilers import JiffyCpuProfiler
from profiler_sim.profilers import PerfectCpuProfiler
from profiler_sim.profilers import PerfectWallclockProfiler
from profiler_sim.stack import StackTrace
from profiler_sim.trace import ExecutionTrace


ALL_PROFILERS = [PerfectWallclockProfiler, PerfectCpuProfiler, FixedRateWallclockProfiler, JiffyCpuProfiler]


def _durations(profile):
    return {st.frames[-1]: st.duration for st in profile}


def test_perfect_wallclock_conserves_duration(pool):
    trace = workload.repeat(100 * SECOND, pool)
    profile = PerfectWallclockProfiler().profile(trace)
    assert profile.total_duration == trace.total_duration
    profile.sort()
    assert str(profile) == (
        "1m2s: (off-cpu) main;sleep\n"
        "25s: (on-cpu) main;workB\n"
        "13s: (on-cpu) main;workA\n"
    )


def test_perfect_cpu_counts_only_cpu(pool):
    trace = workload.repeat(100 * SECOND, pool)
    profile = PerfectCpuProfiler().profile(trace)
    assert profile.total_duration == trace.cpu_duration
    assert all(st.cpu for st in profile)
    assert _durations(profile) == {"workA": 13 * SECOND, "workB": 25 * SECOND}


def test_fixed_rate_single_cycle(cycle):
    period = FixedRateWallclockProfiler.PERIOD
    assert period == 10101010
    profile = FixedRateWallclockProfiler().profile(cycle)
    assert _durations(profile) == {"workA": period, "workB": 2 * period}


def test_fixed_rate_charges_whole_periods(pool):
    trace = workload.repeat(10 * SECOND, pool)
    profile = FixedRateWallclockProfiler().profile(trace)
    assert len(profile) == 2
    for st in profile:
        assert st.duration % FixedRateWallclockProfiler.PERIOD == 0


def test_fixed_rate_misses_short_segments():
    trace = ExecutionTrace(
        [
            StackTrace(duration=5 * MILLISECOND, frames=("main", "sleep")),
            StackTrace(duration=3 * MILLISECOND, frames=("main", "blip"), cpu=True),
            StackTrace(duration=5 * MILLISECOND, frames=("main", "sleep")),
        ],
    )
    assert len(FixedRateWallclockProfiler().profile(trace)) == 0


def test_jiffy_single_period_segment():
    trace = ExecutionTrace([StackTrace(duration=10 * MILLISECOND, frames=("main", "work"), cpu=True)])
    profile = JiffyCpuProfiler().profile(trace)
    assert _durations(profile) == {"work": 10 * MILLISECOND}


def test_jiffy_carries_credit_across_segments():
    trace = ExecutionTrace(
        [
            StackTrace(duration=6 * MILLISECOND, frames=("main", "a"), cpu=True),
            StackTrace(duration=50 * MILLISECOND, frames=("main", "sleep")),
            StackTrace(duration=6 * MILLISECOND, frames=("main", "b"), cpu=True),
        ],
    )
    profile = JiffyCpuProfiler().profile(trace)
    assert _durations(profile) == {"b": 10 * MILLISECOND}


def test_jiffy_single_cycle(cycle):
    profile = JiffyCpuProfiler().profile(cycle)
    assert _durations(profile) == {"workA": 10 * MILLISECOND, "workB": 20 * MILLISECOND}


def test_jiffy_under_one_period():
    trace = ExecutionTrace([StackTrace(duration=9 * MILLISECOND, frames=("main", "work"), cpu=True)])
    assert len(JiffyCpuProfiler().profile(trace)) == 0


@pytest.mark.parametrize("profiler_class", [FixedRateWallclockProfiler, JiffyCpuProfiler])
def test_quantized_samplers_skip_off_cpu(profiler_class):
    trace = ExecutionTrace([StackTrace(duration=SECOND, frames=("main", "sleep"))])
    assert len(profiler_class().profile(trace)) == 0


@pytest.mark.parametrize("profiler_class", [FixedRateWallclockProfiler, JiffyCpuProfiler])
def test_quantized_samplers_never_emit_off_cpu(pool, profiler_class):
    trace = workload.repeat(10 * SECOND, pool)
    assert all(st.cpu for st in profiler_class().profile(trace))


@pytest.mark.parametrize("profiler_class", ALL_PROFILERS)
def test_profilers_leave_trace_untouched(pool, profiler_class):
    trace = workload.repeat(SECOND, pool)
    before = [(st.duration, st.key) for st in trace]
    profile = profiler_class().profile(trace)
    for st in profile:
        st.duration += 1
    assert [(st.duration, st.key) for st in trace] == before


@pytest.mark.parametrize("profiler_class", ALL_PROFILERS)
def test_profilers_are_deterministic(pool, profiler_class):
    trace = workload.repeat(10 * SECOND, pool)
    first = profiler_class().profile(trace)
    second = profiler_class().profile(trace)
    assert str(first) == str(second)


def test_empty_trace():
    for profiler_class in ALL_PROFILERS:
        assert len(profiler_class().profile(ExecutionTrace())) == 0
