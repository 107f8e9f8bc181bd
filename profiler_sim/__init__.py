"""Simulation of how profiler sampling strategies distort an execution profile."""

from .stack import StackTrace
from .trace import ExecutionTrace
from .profile import Profile
from .profiler import Profiler
from .simulator import Simulation, SimulationConfig, SimulationResult
from . import duration
from . import evaluation
from . import metrics
from . import profilers
from . import workload

__all__ = [
	"StackTrace",
	"ExecutionTrace",
	"Profile",
	"Profiler",
	"Simulation",
	"SimulationConfig",
	"SimulationResult",
	"duration",
	"evaluation",
	"metrics",
	"profilers",
	"workload",
]
