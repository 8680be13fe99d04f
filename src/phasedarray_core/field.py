# src/phasedarray_core/field.py
"""
Instantaneous near-field interference intensity used for the animated view.

Every element radiates sin(2*pi*d - 2*pi*speed*t + phase) at distance d (in
wavelengths). The intensity at a point is the magnitude of the summed signals
divided by the element count, which keeps it in [0, 1]. The field is periodic in
time with period 1/speed.
"""
import logging
import math
from typing import Sequence

import numpy as np

from .data_structures import Element, Point
from .geometry import distance

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


def sample_field(elements: Sequence[Element], point: Point, time: float, speed: float) -> float:
    """
    Interference intensity in [0, 1] at `point` and `time`.

    This runs once per sample cell per frame, so it stays in plain `math` and does
    not log.

    Raises:
        ValueError: If `elements` is empty.
    """
    n = len(elements)
    if n == 0:
        raise ValueError("The field of an empty array is undefined.")

    travel = TWO_PI * speed * time
    total = 0.0
    for element in elements:
        d = distance(point, element)
        total += math.sin(TWO_PI * d - travel + math.radians(element.phase))
    return abs(total) / n


def sample_field_grid(
    elements: Sequence[Element],
    xs: Sequence[float],
    ys: Sequence[float],
    time: float,
    speed: float,
) -> np.ndarray:
    """
    Evaluates `sample_field` over the grid spanned by `xs` (columns) and `ys` (rows).

    Returns:
        A (len(ys), len(xs)) array of intensities. An empty array of elements yields
        an all-zero grid, which renders as a blank frame.
    """
    grid_x, grid_y = np.meshgrid(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
    total = np.zeros_like(grid_x)
    n = len(elements)
    if n == 0:
        return total

    travel = TWO_PI * speed * time
    # Accumulate one element at a time to keep memory at O(grid) rather than O(n * grid).
    for element in elements:
        d = np.hypot(grid_x - element.x, grid_y - element.y)
        total += np.sin(TWO_PI * d - travel + math.radians(element.phase))
    return np.abs(total) / n
