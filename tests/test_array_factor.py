# tests/test_array_factor.py
import math

import pytest
import numpy as np

from phasedarray_core import (
    Element, Point, GainPattern, compute_gain_pattern, compute_phases,
    ANGLE_SAMPLES, GAIN_FLOOR_DB,
)
from phasedarray_core.array_factor import array_gain_dbd, normalized_power


class TestGainPatternInvariants:

    def test_peak_is_zero_and_values_are_bounded(self, random_layout):
        pattern = compute_gain_pattern(random_layout)
        assert isinstance(pattern, GainPattern)
        assert pattern.gain_values.shape == (ANGLE_SAMPLES,)
        assert np.max(pattern.gain_values) == pytest.approx(0.0, abs=1e-9)
        assert np.all(pattern.gain_values <= 0.0)
        assert np.all(pattern.gain_values >= GAIN_FLOOR_DB)
        assert np.all(np.isfinite(pattern.gain_values))

    def test_single_element_is_flat(self):
        pattern = compute_gain_pattern([Element(3.0, -2.0, 77.0)])
        np.testing.assert_allclose(pattern.gain_values, 0.0, atol=1e-9)
        assert pattern.array_gain_dbd == 0.0

    def test_array_gain_label(self, quarter_wave_line):
        pattern = compute_gain_pattern(quarter_wave_line)
        assert pattern.array_gain_dbd == pytest.approx(10.0 * math.log10(4))

    def test_empty_array_raises(self):
        with pytest.raises(ValueError):
            compute_gain_pattern([])
        with pytest.raises(ValueError):
            array_gain_dbd(0)

    def test_pattern_is_independent_of_array_position(self, random_layout):
        moved = [e.translated(40.0, -15.0) for e in random_layout]
        np.testing.assert_allclose(
            compute_gain_pattern(moved).gain_values,
            compute_gain_pattern(random_layout).gain_values,
            atol=1e-6,
        )


class TestGainPatternShape:

    def test_half_wave_pair_broadside(self):
        # In-phase pair on the x axis: maxima north/south, exact nulls east/west.
        pattern = compute_gain_pattern([Element(-0.25, 0.0), Element(0.25, 0.0)])
        assert pattern.gain_values[0] == pytest.approx(0.0, abs=1e-9)
        assert pattern.gain_values[180] == pytest.approx(0.0, abs=1e-9)
        assert pattern.gain_values[90] == GAIN_FLOOR_DB
        assert pattern.gain_values[270] == GAIN_FLOOR_DB

    def test_normalized_power_peaks_at_one_for_in_phase_array(self, quarter_wave_line):
        power = normalized_power(quarter_wave_line)
        assert power.max() == pytest.approx(1.0)
        assert power[0] == pytest.approx(1.0)

    def test_steered_line_concentrates_on_the_steering_axis(self, quarter_wave_line):
        # Steering toward the east applies a progressive phase along x; with the
        # array-factor phase convention the main lobe lands at bearing 270.
        steered = compute_phases(quarter_wave_line, Point(50.0, 0.0))
        pattern = compute_gain_pattern(steered)
        assert pattern.gain_values[270] == pytest.approx(0.0, abs=1e-9)
        assert pattern.gain_values[90] == GAIN_FLOOR_DB
        assert pattern.peak_bearing == 270
