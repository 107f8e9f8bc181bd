from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator

from .duration import format_duration
from .stack import StackTrace


class ExecutionTrace:
    """Ground-truth timeline made of contiguous segments.

    Segment ``i`` covers ``[end(i - 1), end(i))`` where ``end`` is the running
    sum of segment durations. The cumulative ends are kept alongside the
    segments so a point lookup is a binary search instead of a scan, which
    means a segment's duration must not change once it has been appended.
    """

    def __init__(self, segments: Iterable[StackTrace] = ()) -> None:
        self._segments: list[StackTrace] = []
        self._ends: list[int] = []
        for segment in segments:
            self.append(segment)

    def append(self, segment: StackTrace) -> None:
        if segment.duration <= 0:
            msg = "trace segments must have a positive duration"
            raise ValueError(msg)
        self._segments.append(segment)
        self._ends.append(self.total_duration + segment.duration)

    def sample(self, offset: int) -> StackTrace | None:
        """Return the segment active ``offset`` ns after the start, or ``None`` past the end.

        A segment ending exactly at ``offset`` wins over the one starting there.
        """

        idx = bisect_left(self._ends, offset)
        if idx == len(self._segments):
            return None
        return self._segments[idx]

    @property
    def total_duration(self) -> int:
        return self._ends[-1] if self._ends else 0

    @property
    def cpu_duration(self) -> int:
        return sum(segment.duration for segment in self._segments if segment.cpu)

    @property
    def segments(self) -> list[StackTrace]:
        return list(self._segments)

    def __iter__(self) -> Iterator[StackTrace]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __str__(self) -> str:
        lines = []
        start = 0
        for segment in self._segments:
            lines.append(f"{format_duration(start)}: {segment}\n")
            start += segment.duration
        lines.append(f"{format_duration(start)}: EXIT\n")
        return "".join(lines)
