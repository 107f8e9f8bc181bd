from __future__ import annotations

from abc import ABC, abstractmethod

from .profile import Profile
from .trace import ExecutionTrace


class Profiler(ABC):
    """Abstract sampling strategy turning a ground-truth trace into a profile."""

    @abstractmethod
    def profile(self, trace: ExecutionTrace) -> Profile:
        """Build a fresh profile from ``trace`` without modifying it."""
