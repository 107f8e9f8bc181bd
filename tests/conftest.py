import pytest

from profiler_sim import workload
from profiler_sim.duration import MILLISECOND


@pytest.fixture
def pool():
    return workload.demo_pool()


@pytest.fixture
def cycle(pool):
    """One pass over the demo pool: 13ms workA, 25ms workB, 62ms sleeping."""
    return workload.repeat(100 * MILLISECOND, pool)
