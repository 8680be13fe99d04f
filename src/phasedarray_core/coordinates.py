# src/phasedarray_core/coordinates.py
"""
Conversions between canvas pixels and array-plane wavelengths.

The canvas centre is the world origin. Canvas y grows downward while world y grows
upward, so the y axis is flipped.
"""
import logging
from typing import Tuple

import numpy as np

from .constants import DEFAULT_SAMPLE_RESOLUTION_PX
from .data_structures import Point

logger = logging.getLogger(__name__)


def _check_scale(wavelength_px: float):
    if not wavelength_px > 0:
        raise ValueError(f"Pixels per wavelength must be positive, got {wavelength_px}.")


def canvas_to_world(px: float, py: float, width: float, height: float, wavelength_px: float) -> Point:
    _check_scale(wavelength_px)
    return Point((px - width / 2) / wavelength_px, (height / 2 - py) / wavelength_px)


def world_to_canvas(point: Point, width: float, height: float, wavelength_px: float) -> Tuple[float, float]:
    _check_scale(wavelength_px)
    return (width / 2 + point.x * wavelength_px, height / 2 - point.y * wavelength_px)


def decimated_axis(
    extent_px: int,
    wavelength_px: float,
    resolution_px: int = DEFAULT_SAMPLE_RESOLUTION_PX,
    axis: str = 'x',
) -> np.ndarray:
    """
    World coordinates (wavelengths) of the sample cells along one canvas axis.

    A renderer filling `resolution_px`-sized cells samples pixel positions
    0, r, 2r, ... below `extent_px`. For axis 'y' the values decrease from top to
    bottom, matching the canvas row order.
    """
    _check_scale(wavelength_px)
    if resolution_px < 1:
        raise ValueError(f"Sample resolution must be at least one pixel, got {resolution_px}.")
    if axis not in ('x', 'y'):
        raise ValueError(f"Invalid axis '{axis}'. Must be 'x' or 'y'.")
    pixels = np.arange(0, extent_px, resolution_px, dtype=float)
    if axis == 'x':
        return (pixels - extent_px / 2) / wavelength_px
    return (extent_px / 2 - pixels) / wavelength_px
