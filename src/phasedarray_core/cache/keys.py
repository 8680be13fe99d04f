# src/phasedarray_core/cache/keys.py
"""
Builds the content keys under which steering and gain-pattern results are memoized.

Both results are pure functions of plain numbers, so a key is simply the exact
float values of every input, wrapped in tuples to make it hashable. Element order is
kept because the returned element list follows the input order.
"""
from typing import Optional, Sequence, Tuple

from ..data_structures import Element, Point


def _elements_signature(elements: Sequence[Element]) -> Tuple[Tuple[float, float, float], ...]:
    return tuple((e.x, e.y, e.phase) for e in elements)


def create_array_state_key(elements: Sequence[Element], target: Optional[Point]) -> Tuple:
    """
    Key for the steered element list. The element phases are part of the key because
    without a target they pass through unchanged.
    """
    target_signature = None if target is None else (target.x, target.y)
    return ("steering", _elements_signature(elements), target_signature)


def create_gain_pattern_key(elements: Sequence[Element]) -> Tuple:
    """Key for a gain pattern, which depends only on the (already steered) elements."""
    return ("gain_pattern", _elements_signature(elements))
