from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Sequence

from .profile import Profile
from .stack import StackKey


@dataclass(slots=True)
class StackBias:
    key: StackKey
    expected: int
    observed: int
    expected_share: float
    observed_share: float

    @property
    def share_error(self) -> float:
        return self.observed_share - self.expected_share


@dataclass(slots=True)
class AggregateBias:
    count: int
    expected_total: int
    observed_total: int
    coverage: float
    mean_abs_share_error: float
    max_abs_share_error: float
    total_variation: float


def build_stack_bias(observed: Profile, expected: Profile) -> list[StackBias]:
    """Line up both profiles by stack identity, reference stacks first."""

    expected_total = expected.total_duration
    observed_total = observed.total_duration
    keys = [st.key for st in expected]
    keys.extend(st.key for st in observed if expected.get(st.key) is None)

    biases: list[StackBias] = []
    for key in keys:
        exp = _duration(expected, key)
        obs = _duration(observed, key)
        biases.append(
            StackBias(
                key=key,
                expected=exp,
                observed=obs,
                expected_share=exp / expected_total if expected_total else 0.0,
                observed_share=obs / observed_total if observed_total else 0.0,
            ),
        )
    return biases


def summarise(biases: Sequence[StackBias]) -> AggregateBias:
    if not biases:
        return AggregateBias(
            count=0,
            expected_total=0,
            observed_total=0,
            coverage=0.0,
            mean_abs_share_error=0.0,
            max_abs_share_error=0.0,
            total_variation=0.0,
        )
    expected_total = sum(b.expected for b in biases)
    observed_total = sum(b.observed for b in biases)
    errors = [abs(b.share_error) for b in biases]
    return AggregateBias(
        count=len(biases),
        expected_total=expected_total,
        observed_total=observed_total,
        coverage=observed_total / expected_total if expected_total else 0.0,
        mean_abs_share_error=mean(errors),
        max_abs_share_error=max(errors),
        total_variation=sum(errors) / 2,
    )


def _duration(profile: Profile, key: StackKey) -> int:
    stack = profile.get(key)
    return stack.duration if stack is not None else 0
