# src/phasedarray_core/simulation/results.py
"""
Defines the immutable result of a single animation tick.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from ..data_structures import Element, EmissionRings, GainPattern
from .clock import SimulationClock


@dataclass(frozen=True, eq=False)
class FrameResult:
    """
    Everything the renderer needs for one frame.

    Attributes:
        clock: The clock value the frame was computed for.
        elements: The elements with steering phases applied (unchanged when there is
                  no usable target).
        gain_pattern: The normalized gain pattern, or None for an empty array.
        field_samples: Intensity at each requested field point, in request order.
        rings: Emission rings per element, in element order.
    """
    clock: SimulationClock
    elements: Tuple[Element, ...]
    gain_pattern: Optional[GainPattern]
    field_samples: Tuple[float, ...] = ()
    rings: Tuple[EmissionRings, ...] = ()
