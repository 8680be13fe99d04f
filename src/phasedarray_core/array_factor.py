# src/phasedarray_core/array_factor.py
"""
Far-field array factor of a planar array of isotropic elements.

For every integer bearing the complex contributions of all elements are summed
coherently. The squared magnitude, normalized by n**2, is the relative power in that
direction; the resulting dB pattern is shifted so its peak sits at 0 dB and clamped
at GAIN_FLOOR_DB.

The bearing sweep is a single (bearings x elements) matrix product, so the per-angle
work is already batched by NumPy rather than looped in Python.
"""
import logging
import math
from typing import Sequence

import numpy as np

from .constants import ANGLE_SAMPLES, GAIN_FLOOR_DB
from .data_structures import Element, GainPattern
from .geometry import bearing_unit_vectors, centroid, positions_array

logger = logging.getLogger(__name__)

_BEARINGS_DEG = np.arange(ANGLE_SAMPLES, dtype=float)
_BEARING_VECTORS = bearing_unit_vectors(_BEARINGS_DEG)


def array_gain_dbd(element_count: int) -> float:
    """Theoretical directivity label of an n-element array, 10*log10(n)."""
    if element_count < 1:
        raise ValueError(f"Array gain is undefined for {element_count} elements.")
    return 10.0 * math.log10(element_count)


def normalized_power(elements: Sequence[Element]) -> np.ndarray:
    """
    |S(a)|**2 / n**2 for each of the ANGLE_SAMPLES bearings, where S(a) is the coherent
    sum of exp(j * (2*pi * <r_i - C, u(a)> + phase_i)).
    """
    n = len(elements)
    offsets = positions_array(elements) - np.array(centroid(elements).as_tuple())
    phases_rad = np.deg2rad([element.phase for element in elements])

    # (ANGLE_SAMPLES, n) matrix of total phase per bearing and element.
    total_phase = 2.0 * np.pi * (_BEARING_VECTORS @ offsets.T) + phases_rad
    array_sum = np.exp(1j * total_phase).sum(axis=1)
    return np.abs(array_sum) ** 2 / float(n * n)


def compute_gain_pattern(elements: Sequence[Element]) -> GainPattern:
    """
    Computes the normalized 360-sample gain pattern and the array gain label.

    Args:
        elements: At least one element, with phases already applied.

    Returns:
        A GainPattern whose values all lie in [GAIN_FLOOR_DB, 0] with at least one
        sample exactly at 0 dB.

    Raises:
        ValueError: If `elements` is empty.
    """
    n = len(elements)
    if n == 0:
        raise ValueError("A gain pattern requires at least one element.")

    power = normalized_power(elements)
    # Exact nulls give -inf here, which the floor below clamps.
    with np.errstate(divide='ignore'):
        gain_db = 10.0 * np.log10(power)

    max_gain = float(np.max(gain_db))
    if not math.isfinite(max_gain):
        logger.warning("Array factor vanished at every sampled bearing; returning a flat pattern.")
        processed = np.zeros(ANGLE_SAMPLES)
    else:
        processed = np.maximum(gain_db - max_gain, GAIN_FLOOR_DB)

    return GainPattern(gain_values=processed, array_gain_dbd=array_gain_dbd(n))
