# src/phasedarray_core/emission.py
"""
Expanding wavefront rings drawn around each element.

Crest rings sit at base, base + 1, base + 2, ... wavelengths, where the base radius
advances with time at the wave speed and is offset by the element's phase. Trough
rings are the crests shifted inward by half a wavelength.
"""
import logging
import math
from typing import Tuple

from .data_structures import Element, EmissionRings

logger = logging.getLogger(__name__)


def base_radius(element: Element, time: float, speed: float) -> float:
    """Radius of the innermost crest, in [0, 1) wavelengths."""
    radius = (((time * speed) % 1.0) + element.phase / 360.0) % 1.0
    # Float modulo of a tiny negative can land exactly on the upper bound.
    return 0.0 if radius >= 1.0 else radius


def circle_radii(element: Element, time: float, speed: float, max_radius: float) -> Tuple[float, ...]:
    """
    Crest radii base, base + 1, ... up to and including `max_radius`. A non-positive
    `max_radius` yields no rings.

    Each radius is computed from the base directly so the spacing does not drift
    through repeated float additions.

    Raises:
        ValueError: If `max_radius` is NaN or infinite.
    """
    if not math.isfinite(max_radius):
        raise ValueError(f"Maximum ring radius must be finite, got {max_radius}.")
    if max_radius <= 0:
        return ()
    base = base_radius(element, time, speed)
    radii = []
    k = 0
    while base + k <= max_radius:
        radii.append(base + k)
        k += 1
    return tuple(radii)


def _troughs_from_crests(crests: Tuple[float, ...]) -> Tuple[float, ...]:
    return tuple(radius - 0.5 for radius in crests if radius - 0.5 > 0)


def trough_radii(element: Element, time: float, speed: float, max_radius: float) -> Tuple[float, ...]:
    """Crest radii shifted by -0.5 wavelength, keeping only positive radii."""
    return _troughs_from_crests(circle_radii(element, time, speed, max_radius))


def emission_rings(element: Element, time: float, speed: float, max_radius: float) -> EmissionRings:
    crests = circle_radii(element, time, speed, max_radius)
    return EmissionRings(element=element, crests=crests, troughs=_troughs_from_crests(crests))
