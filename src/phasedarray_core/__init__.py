# src/phasedarray_core/__init__.py
import logging
from .log_config import setup_logging

# The core is called every animation frame; keep library logging quiet by default.
setup_logging(logging.WARNING)
logger = logging.getLogger(__name__)
logger.info("phasedarray_core package initialized.")

from .units import ureg, pint, Quantity, to_wavelengths, to_degrees
from .constants import (
    ANGLE_SAMPLES, GAIN_FLOOR_DB, MIN_SPEED, MAX_SPEED, DEFAULT_SPEED,
    FRAME_TIME_STEP, DEFAULT_GRID_CELLS, DEFAULT_SAMPLE_RESOLUTION_PX,
)
from .data_structures import Point, Element, GainPattern, EmissionRings, Configuration, as_point
from .geometry import centroid, normalize, direction_vector, bearing_unit_vector
from .steering import compute_phases
from .array_factor import compute_gain_pattern
from .field import sample_field, sample_field_grid
from .emission import circle_radii, trough_radii, emission_rings
from .coordinates import canvas_to_world, world_to_canvas, decimated_axis
from .cache import ArrayModelCache, create_array_state_key
from .validation import ArrayStateValidator, ArrayStateValidationError, ValidationIssue, ValidationIssueLevel
from .parser import (
    ConfigurationParser, ConfigurationStore, dump_configuration_yaml, load_configuration,
    ParsingError, SchemaValidationError,
)
from .simulation import SimulationClock, FrameResult, run_tick
from .errors import PhasedArrayError, ConfigurationLoadError, SimulationRunError

__all__ = [
    # Units
    "ureg", "pint", "Quantity", "to_wavelengths", "to_degrees",
    # Constants
    "ANGLE_SAMPLES", "GAIN_FLOOR_DB", "MIN_SPEED", "MAX_SPEED", "DEFAULT_SPEED",
    "FRAME_TIME_STEP", "DEFAULT_GRID_CELLS", "DEFAULT_SAMPLE_RESOLUTION_PX",
    # Data Structures
    "Point", "Element", "GainPattern", "EmissionRings", "Configuration", "as_point",
    # Geometry
    "centroid", "normalize", "direction_vector", "bearing_unit_vector",
    # Core Computations
    "compute_phases", "compute_gain_pattern", "sample_field", "sample_field_grid",
    "circle_radii", "trough_radii", "emission_rings",
    # Canvas Coordinates
    "canvas_to_world", "world_to_canvas", "decimated_axis",
    # Caching
    "ArrayModelCache", "create_array_state_key",
    # Validation
    "ArrayStateValidator", "ArrayStateValidationError", "ValidationIssue", "ValidationIssueLevel",
    # Persistence
    "ConfigurationParser", "ConfigurationStore", "dump_configuration_yaml", "load_configuration",
    "ParsingError", "SchemaValidationError",
    # Simulation
    "SimulationClock", "FrameResult", "run_tick",
    # Top-Level Errors (Actionable Diagnostics)
    "PhasedArrayError", "ConfigurationLoadError", "SimulationRunError",
]
