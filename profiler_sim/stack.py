from __future__ import annotations

from dataclasses import dataclass, replace

StackKey = tuple[tuple[str, ...], bool]


@dataclass(slots=True, eq=False)
class StackTrace:
    """One scheduling segment: a call stack held on or off the CPU for ``duration`` ns."""

    duration: int
    frames: tuple[str, ...]
    cpu: bool = False

    def __post_init__(self) -> None:
        if self.duration < 0:
            msg = "duration cannot be negative"
            raise ValueError(msg)
        self.frames = tuple(self.frames)

    @property
    def key(self) -> StackKey:
        """Stack identity: the frames and the cpu flag, never the duration."""

        return (self.frames, self.cpu)

    def same_stack(self, other: StackTrace) -> bool:
        return self.cpu == other.cpu and self.frames == other.frames

    def copy(self) -> StackTrace:
        return replace(self)

    def with_duration(self, duration: int) -> StackTrace:
        return replace(self, duration=duration)

    def __str__(self) -> str:
        prefix = "(on-cpu)" if self.cpu else "(off-cpu)"
        return f"{prefix} {';'.join(self.frames)}"
