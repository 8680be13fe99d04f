# src/phasedarray_core/constants.py
import logging

logger = logging.getLogger(__name__)

# --- Array Factor ---

#: Number of 1-degree bearings sampled by the gain pattern sweep.
ANGLE_SAMPLES: int = 360

#: Lower clamp of the normalized gain pattern, in dB relative to the peak.
GAIN_FLOOR_DB: float = -40.0

# --- Steering ---

#: Distance (in wavelengths) below which the target is considered to coincide with
#: the array centroid, making the steering direction undefined.
CENTROID_TOLERANCE: float = 1.0e-12

# --- Animation ---

#: Accepted range of the wave speed, in wavelengths per second.
MIN_SPEED: float = 0.1
MAX_SPEED: float = 5.0
DEFAULT_SPEED: float = 2.0

#: Time added to the simulation clock per animation frame, per unit of wave speed.
FRAME_TIME_STEP: float = 0.1

# --- Rendering Layout ---

#: Number of one-wavelength grid cells across the default square view.
DEFAULT_GRID_CELLS: int = 10

#: Edge length, in pixels, of one field sample cell on the canvas.
DEFAULT_SAMPLE_RESOLUTION_PX: int = 4

logger.debug("Defined core constants: ANGLE_SAMPLES, GAIN_FLOOR_DB, MIN_SPEED, MAX_SPEED")
