# src/phasedarray_core/simulation/clock.py
from dataclasses import dataclass

from ..constants import FRAME_TIME_STEP


@dataclass(frozen=True)
class SimulationClock:
    """
    The animation time, passed by value into each tick.

    The clock is owned by whoever drives the animation; advancing it returns a new
    clock rather than mutating shared state, so field sampling stays a pure
    function of its arguments.
    """
    time: float = 0.0

    def advance(self, dt: float) -> "SimulationClock":
        """Returns a clock `dt` seconds later. Time never runs backwards."""
        if dt < 0:
            raise ValueError(f"Simulation time is monotonic; cannot advance by {dt}.")
        return SimulationClock(self.time + dt)

    def advance_for_frame(self, speed: float) -> "SimulationClock":
        """Advances by one animation frame, which scales with the wave speed."""
        return self.advance(FRAME_TIME_STEP * speed)

    @staticmethod
    def period(speed: float) -> float:
        """Time after which the animated field repeats."""
        if not speed > 0:
            raise ValueError(f"Wave speed must be positive, got {speed}.")
        return 1.0 / speed
