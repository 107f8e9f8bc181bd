from __future__ import annotations

import logging
from typing import Sequence

from .duration import MILLISECOND, format_duration
from .stack import StackTrace
from .trace import ExecutionTrace


LOG = logging.getLogger(__name__)


def repeat(duration: int, pool: Sequence[StackTrace]) -> ExecutionTrace:
    """Tile ``pool`` in order until the trace reaches ``duration``.

    The segment that crosses the target is kept whole, so the trace may run
    past ``duration`` by less than the longest template.
    """

    if not pool:
        msg = "pool must contain at least one stack trace"
        raise ValueError(msg)
    if duration < 0:
        msg = "duration cannot be negative"
        raise ValueError(msg)
    if any(template.duration <= 0 for template in pool):
        msg = "pool stack traces must have a positive duration"
        raise ValueError(msg)

    trace = ExecutionTrace()
    while True:
        for template in pool:
            trace.append(template.copy())
            if trace.total_duration >= duration:
                LOG.debug(
                    "Built trace of %d segments spanning %s",
                    len(trace),
                    format_duration(trace.total_duration),
                )
                return trace


def random_trace(seed: int, duration: int, pool: Sequence[StackTrace]) -> ExecutionTrace:
    """Build a randomised trace from ``pool``.

    The duration distribution and pool sampling policy are undecided, so this
    refuses to produce anything rather than hand back a made-up trace.
    """

    msg = "random_trace is not implemented"
    raise NotImplementedError(msg)


def demo_pool() -> list[StackTrace]:
    return [
        StackTrace(duration=13 * MILLISECOND, frames=("main", "workA"), cpu=True),
        StackTrace(duration=25 * MILLISECOND, frames=("main", "workB"), cpu=True),
        StackTrace(duration=62 * MILLISECOND, frames=("main", "sleep")),
    ]
