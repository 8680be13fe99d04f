# src/phasedarray_core/simulation/__init__.py
from .clock import SimulationClock
from .results import FrameResult
from .execution import run_tick

__all__ = [
    "SimulationClock",
    "FrameResult",
    "run_tick",
]
