# tests/test_steering.py
import logging
import math

import pytest
import numpy as np

from phasedarray_core import Element, Point, compute_phases
from phasedarray_core.steering import path_to_phase_degrees, project_onto_target
from tests.conftest import circular_difference


class TestSteeringDegenerateInputs:

    def test_no_target_is_identity(self, random_layout):
        assert compute_phases(random_layout, None) == random_layout

    def test_no_target_returns_a_new_list(self, random_layout):
        result = compute_phases(random_layout, None)
        assert result is not random_layout

    def test_empty_array(self):
        assert compute_phases([], Point(1.0, 1.0)) == []

    def test_target_on_centroid_leaves_phases_unchanged(self):
        elements = [Element(-1.0, 0.0, 45.0), Element(1.0, 0.0, 300.0)]
        result = compute_phases(elements, Point(0.0, 0.0))
        assert result == elements
        assert all(math.isfinite(e.phase) for e in result)

    def test_target_on_centroid_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="phasedarray_core.steering")
        compute_phases([Element(-1.0, 0.0), Element(1.0, 0.0)], Point(0.0, 0.0))
        assert "coincides with the array centroid" in caplog.text

    def test_single_element_gets_zero_phase(self):
        result = compute_phases([Element(2.0, 3.0, 123.0)], Point(5.0, 5.0))
        assert result == [Element(2.0, 3.0, 0.0)]


class TestSteeringScenarios:

    def test_symmetric_target_gives_equal_phases(self, two_element_array):
        left, right = compute_phases(two_element_array, Point(0.0, -2.0))
        assert left.phase == pytest.approx(right.phase)

    def test_offset_target_advances_the_leading_element(self, two_element_array):
        back, front = compute_phases(two_element_array, Point(1.0, -2.0))
        assert back.phase == 0.0
        assert front.phase > back.phase
        # Extra path is 2/sqrt(5) wavelengths along the steering direction.
        expected = ((2.0 / math.sqrt(5.0)) % 1.0) * 360.0
        assert front.phase == pytest.approx(expected)

    def test_positions_are_untouched(self, random_layout):
        steered = compute_phases(random_layout, Point(4.0, -1.0))
        assert [(e.x, e.y) for e in steered] == [(e.x, e.y) for e in random_layout]

    def test_phases_in_range_and_reference_is_back_most(self, random_layout, random_targets):
        for target in random_targets:
            steered = compute_phases(random_layout, target)
            phases = np.array([e.phase for e in steered])
            assert np.all(phases >= 0.0)
            assert np.all(phases < 360.0)

            projections = project_onto_target(random_layout, target)
            assert steered[int(np.argmin(projections))].phase == 0.0

    def test_translation_invariance(self, random_layout, random_targets):
        shift = (12.5, -7.25)
        moved = [e.translated(*shift) for e in random_layout]
        for target in random_targets:
            original = compute_phases(random_layout, target)
            translated = compute_phases(moved, target.translated(*shift))
            for a, b in zip(original, translated):
                assert circular_difference(a.phase, b.phase) < 1e-6
                assert b.x == pytest.approx(a.x + shift[0])
                assert b.y == pytest.approx(a.y + shift[1])


class TestPathToPhase:

    @pytest.mark.parametrize("path, expected", [
        (0.0, 0.0),
        (0.25, 90.0),
        (1.25, 90.0),
        (2.0, 0.0),
        (0.999, 359.64),
    ])
    def test_wraps_whole_wavelengths(self, path, expected):
        assert path_to_phase_degrees(path) == pytest.approx(expected)
