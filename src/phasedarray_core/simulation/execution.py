# src/phasedarray_core/simulation/execution.py
"""
Provides the per-frame entry point used by an animation driver.

`run_tick` is a thin facade over the pure core functions. Each call:

1.  Validates the element layout, target and wave speed.
2.  Applies steering phases and computes the gain pattern, both memoized in an
    `ArrayModelCache` so they are only recomputed when the layout or target change.
3.  Samples the field at the requested points and builds the emission rings for
    the current clock value.

Diagnosable failures are reported as a single `SimulationRunError`.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..array_factor import compute_gain_pattern
from ..cache import ArrayModelCache, create_array_state_key, create_gain_pattern_key
from ..data_structures import Element, GainPattern, Point, as_point
from ..emission import emission_rings
from ..errors import DiagnosableError, SimulationRunError
from ..field import sample_field
from ..steering import compute_phases
from ..validation import ArrayStateValidationError, ArrayStateValidator, ValidationIssueLevel
from .clock import SimulationClock
from .results import FrameResult

logger = logging.getLogger(__name__)


def _steered_elements(elements: Sequence[Element], target: Optional[Point], cache: ArrayModelCache) -> List[Element]:
    key = create_array_state_key(elements, target)
    cached = cache.get(key)
    if cached is not None:
        return list(cached)
    steered = compute_phases(elements, target)
    cache.put(key, tuple(steered))
    return steered


def _gain_pattern(elements: Sequence[Element], cache: ArrayModelCache) -> Optional[GainPattern]:
    if not elements:
        return None
    key = create_gain_pattern_key(elements)
    cached = cache.get(key)
    if cached is not None:
        return cached
    pattern = compute_gain_pattern(elements)
    cache.put(key, pattern)
    return pattern


def run_tick(
    elements: Sequence[Element],
    target: Optional[Point],
    clock: SimulationClock,
    speed: float,
    cache: Optional[ArrayModelCache] = None,
    field_points: Optional[Iterable] = None,
    max_radius: Optional[float] = None,
) -> Tuple[FrameResult, ArrayModelCache]:
    """
    Computes one animation frame.

    Args:
        elements: The current element layout. It is never mutated.
        target: The steering target, or None to keep the elements' own phases.
        clock: The current animation time.
        speed: Wave speed in wavelengths per second.
        cache: An `ArrayModelCache` to reuse between ticks. A new one is created when
               omitted; pass the returned cache back in on the next tick.
        field_points: Optional points (Point, (x, y) pairs or {'x', 'y'} mappings) at
                      which to sample the interference intensity.
        max_radius: Optional outer radius, in wavelengths, for the emission rings.
                    Rings are skipped when omitted.

    Returns:
        A tuple of the `FrameResult` and the cache that was used.

    Raises:
        SimulationRunError: If the array state is invalid (non-finite values or wave
                            speed out of range). The original error is chained.
    """
    effective_cache = cache if cache is not None else ArrayModelCache()
    target = None if target is None else as_point(target)

    try:
        issues = ArrayStateValidator(elements, target, speed).validate()
        if any(issue.level == ValidationIssueLevel.ERROR for issue in issues):
            raise ArrayStateValidationError(issues)

        steered = _steered_elements(elements, target, effective_cache)
        pattern = _gain_pattern(steered, effective_cache)

        samples: Tuple[float, ...] = ()
        if field_points is not None and steered:
            samples = tuple(
                sample_field(steered, as_point(p), clock.time, speed) for p in field_points
            )

        rings = ()
        if max_radius is not None:
            rings = tuple(emission_rings(e, clock.time, speed, max_radius) for e in steered)

        result = FrameResult(
            clock=clock,
            elements=tuple(steered),
            gain_pattern=pattern,
            field_samples=samples,
            rings=rings,
        )
        return result, effective_cache

    except DiagnosableError as e:
        logger.error(f"Simulation tick at t={clock.time} failed: {e}")
        raise SimulationRunError(e.get_diagnostic_report()) from e
