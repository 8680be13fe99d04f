# src/phasedarray_core/geometry.py
"""
Planar geometry helpers shared by the steering, array factor and field modules.

Bearings follow the rendering convention of the gain chart: 0 degrees points north
(+y) and bearings increase clockwise, so 90 degrees points east (+x).
"""
import logging
import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .constants import CENTROID_TOLERANCE
from .data_structures import Element, Point

logger = logging.getLogger(__name__)

Located = Union[Element, Point]


def positions_array(items: Sequence[Located]) -> np.ndarray:
    """Returns an (n, 2) float array of the x/y positions of the given elements or points."""
    if len(items) == 0:
        return np.empty((0, 2), dtype=float)
    return np.array([(item.x, item.y) for item in items], dtype=float)


def centroid(items: Sequence[Located]) -> Point:
    """
    Mean position of the given elements or points.

    Raises:
        ValueError: If `items` is empty.
    """
    if len(items) == 0:
        raise ValueError("The centroid of an empty set of positions is undefined.")
    mean = positions_array(items).mean(axis=0)
    return Point(float(mean[0]), float(mean[1]))


def normalize(dx: float, dy: float, tolerance: float = CENTROID_TOLERANCE) -> Optional[Tuple[float, float]]:
    """
    Scales (dx, dy) to unit length.

    Returns None instead of dividing by zero when the vector is shorter than
    `tolerance`.
    """
    length = math.hypot(dx, dy)
    if not length > tolerance:
        return None
    return (dx / length, dy / length)


def direction_vector(origin: Point, target: Point) -> Optional[Tuple[float, float]]:
    """Unit vector from `origin` toward `target`, or None if the two coincide."""
    return normalize(target.x - origin.x, target.y - origin.y)


def bearing_unit_vector(bearing_deg: float) -> Tuple[float, float]:
    """Unit vector for a compass bearing (0 = north/+y, clockwise)."""
    radians = math.radians(bearing_deg)
    return (math.sin(radians), math.cos(radians))


def bearing_unit_vectors(bearings_deg: np.ndarray) -> np.ndarray:
    """Vectorized `bearing_unit_vector`; returns an (m, 2) array."""
    radians = np.deg2rad(np.asarray(bearings_deg, dtype=float))
    return np.column_stack((np.sin(radians), np.cos(radians)))


def distance(a: Located, b: Located) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)
