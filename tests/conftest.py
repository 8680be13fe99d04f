# tests/conftest.py
import pytest
import numpy as np

from phasedarray_core import ArrayModelCache, Element, Point


@pytest.fixture
def two_element_array():
    """Two in-phase elements two wavelengths apart on the x axis."""
    return [Element(-1.0, 0.0), Element(1.0, 0.0)]


@pytest.fixture
def quarter_wave_line():
    """Four elements spaced a quarter wavelength apart along x, centred on the origin."""
    return [Element(x, 0.0) for x in (-0.375, -0.125, 0.125, 0.375)]


@pytest.fixture
def random_layout():
    """A reproducible, irregular layout of seven elements with arbitrary phases."""
    rng = np.random.default_rng(seed=229)
    coords = rng.uniform(-3.0, 3.0, size=(7, 2))
    phases = rng.uniform(0.0, 360.0, size=7)
    return [Element(float(x), float(y), float(p)) for (x, y), p in zip(coords, phases)]


@pytest.fixture
def random_targets():
    rng = np.random.default_rng(seed=6390)
    return [Point(float(x), float(y)) for x, y in rng.uniform(-8.0, 8.0, size=(10, 2))]


@pytest.fixture
def model_cache():
    return ArrayModelCache()


def circular_difference(a, b):
    """Smallest absolute difference between two angles in degrees."""
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)
