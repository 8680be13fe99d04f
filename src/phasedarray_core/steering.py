# src/phasedarray_core/steering.py
"""
Computes the per-element phase offsets that steer the array toward a target point.

Each element is projected onto the unit direction from the array centroid to the
target. The back-most element (minimum projection) is the 0-degree reference; every
other element is delayed by its extra path length along the steering direction,
expressed in degrees and wrapped into [0, 360).
"""
import logging
from typing import List, Optional, Sequence

import numpy as np

from .data_structures import Element, Point, wrap_degrees
from .geometry import centroid, direction_vector, positions_array

logger = logging.getLogger(__name__)


def project_onto_target(elements: Sequence[Element], target: Point) -> Optional[np.ndarray]:
    """
    Signed projection (in wavelengths) of each element's offset from the centroid onto
    the centroid-to-target direction.

    Returns None when there are no elements or the target coincides with the centroid,
    in which case the steering direction is undefined.
    """
    if len(elements) == 0:
        return None
    center = centroid(elements)
    direction = direction_vector(center, target)
    if direction is None:
        return None
    offsets = positions_array(elements) - np.array(center.as_tuple())
    return offsets @ np.array(direction)


def path_to_phase_degrees(relative_path: float) -> float:
    """Converts an extra path length in wavelengths into a phase in [0, 360) degrees."""
    return wrap_degrees((((relative_path % 1.0) * 360.0) + 360.0) % 360.0)


def compute_phases(elements: Sequence[Element], target: Optional[Point]) -> List[Element]:
    """
    Returns the elements with their phases overwritten to steer toward `target`.

    Positions are never changed and the input sequence is not mutated. When there is
    no target, no elements, or the target sits on the array centroid, the elements are
    returned unchanged.

    The result depends only on the geometry relative to the centroid, so translating
    every element and the target by the same vector leaves the phases unchanged.
    """
    if target is None or len(elements) == 0:
        return list(elements)

    projections = project_onto_target(elements, target)
    if projections is None:
        logger.debug(
            "Steering target (%s, %s) coincides with the array centroid; phases left unchanged.",
            target.x, target.y,
        )
        return list(elements)

    reference_index = int(np.argmin(projections))
    reference = projections[reference_index]
    return [
        element.with_phase(path_to_phase_degrees(float(p - reference)))
        for element, p in zip(elements, projections)
    ]
