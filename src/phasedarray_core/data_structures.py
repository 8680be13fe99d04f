# src/phasedarray_core/data_structures.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def _as_float(name: str, value: Any) -> float:
    # bool is a Real subclass but never a meaningful coordinate.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Field '{name}' must be a real number, got {type(value).__name__}: {value!r}")
    return float(value)


def wrap_degrees(phase: float) -> float:
    """Wraps a phase in degrees into [0, 360). Non-finite values are returned as-is."""
    if not math.isfinite(phase):
        return phase
    wrapped = phase % 360.0
    # Tiny negative inputs round up to exactly 360.0 under float modulo.
    if wrapped >= 360.0:
        return 0.0
    return wrapped


@dataclass(frozen=True)
class Point:
    """A location in the array plane, in wavelengths (x to the right, y upward)."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', _as_float('x', self.x))
        object.__setattr__(self, 'y', _as_float('y', self.y))

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Element:
    """
    An idealized isotropic point radiator.

    Position is in wavelengths, phase in degrees. The phase is wrapped into [0, 360)
    on construction so every Element satisfies the phase-range invariant, whether the
    phase was set by the user or computed by the steering calculator.
    """
    x: float
    y: float
    phase: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', _as_float('x', self.x))
        object.__setattr__(self, 'y', _as_float('y', self.y))
        object.__setattr__(self, 'phase', wrap_degrees(_as_float('phase', self.phase)))

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def phase_radians(self) -> float:
        return math.radians(self.phase)

    def with_phase(self, phase: float) -> Element:
        return replace(self, phase=phase)

    def translated(self, dx: float, dy: float) -> Element:
        return replace(self, x=self.x + dx, y=self.y + dy)


def as_point(value: Any) -> Point:
    """Accepts a Point, an (x, y) pair or a mapping with 'x' and 'y' keys."""
    if isinstance(value, Point):
        return value
    if isinstance(value, dict):
        try:
            return Point(value['x'], value['y'])
        except KeyError as e:
            raise ValueError(f"Point mapping is missing key {e}: {value!r}") from e
    try:
        x, y = value
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot interpret {value!r} as a point.") from e
    return Point(x, y)


@dataclass(frozen=True, eq=False)
class GainPattern:
    """
    The normalized far-field gain of an array, one sample per integer bearing.

    Attributes:
        gain_values: Read-only array of 360 values in dB relative to the peak
                     (peak is 0 dB, tail floored at -40 dB). Index `a` is the
                     bearing in degrees, 0 pointing north, increasing clockwise.
        array_gain_dbd: 10*log10(n), the theoretical directivity label of an
                        n-element array. It is not derived from `gain_values`.
    """
    gain_values: np.ndarray
    array_gain_dbd: float

    def __post_init__(self):
        values = np.array(self.gain_values, dtype=float)
        values.setflags(write=False)
        object.__setattr__(self, 'gain_values', values)
        object.__setattr__(self, 'array_gain_dbd', float(self.array_gain_dbd))

    @property
    def peak_bearing(self) -> int:
        """Bearing (degrees) of the first sample at the pattern peak."""
        return int(np.argmax(self.gain_values))

    def gain_at(self, bearing_deg: float) -> float:
        """Gain of the nearest sampled bearing, in dB relative to the peak."""
        index = int(round(bearing_deg)) % len(self.gain_values)
        return float(self.gain_values[index])


@dataclass(frozen=True)
class EmissionRings:
    """Crest and trough wavefront radii (in wavelengths) around one element at one instant."""
    element: Element
    crests: Tuple[float, ...] = field(default_factory=tuple)
    troughs: Tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Configuration:
    """
    A named, persisted array layout: the elements and the optional steering target.
    This is the record exchanged with YAML export/import and the JSON store.
    """
    name: str
    antennas: Tuple[Element, ...]
    target: Optional[Point] = None

    def __post_init__(self):
        object.__setattr__(self, 'antennas', tuple(self.antennas))
