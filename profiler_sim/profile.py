from __future__ import annotations

from typing import Iterator

from .duration import format_duration
from .stack import StackKey, StackTrace


class Profile:
    """Weighted histogram of stacks keyed by stack identity.

    Every element is a copy owned by the profile, so merging durations never
    touches the trace the samples came from.
    """

    def __init__(self) -> None:
        self._stacks: list[StackTrace] = []
        self._index: dict[StackKey, int] = {}

    def add(self, sample: StackTrace) -> None:
        idx = self._index.get(sample.key)
        if idx is not None:
            self._stacks[idx].duration += sample.duration
            return
        self._index[sample.key] = len(self._stacks)
        self._stacks.append(sample.copy())

    def sort(self) -> None:
        """Order by duration, largest first. Equal durations keep insertion order."""

        self._stacks.sort(key=lambda st: st.duration, reverse=True)
        self._index = {st.key: idx for idx, st in enumerate(self._stacks)}

    def get(self, key: StackKey) -> StackTrace | None:
        idx = self._index.get(key)
        if idx is None:
            return None
        return self._stacks[idx]

    @property
    def total_duration(self) -> int:
        return sum(st.duration for st in self._stacks)

    @property
    def stacks(self) -> list[StackTrace]:
        return list(self._stacks)

    def __iter__(self) -> Iterator[StackTrace]:
        return iter(self._stacks)

    def __len__(self) -> int:
        return len(self._stacks)

    def __str__(self) -> str:
        return "".join(f"{format_duration(st.duration)}: {st}\n" for st in self._stacks)
