# src/phasedarray_core/units.py
import logging
from typing import Union

import pint

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity

# All positions are measured in wavelengths of the single operating frequency.
# The wavelength gets its own base dimension so that physical lengths (metres)
# cannot be silently mixed in without knowing the frequency.
ureg.define("wavelength = [electrical_length] = wl")

WAVELENGTH_DIMENSIONALITY = ureg.parse_expression('wavelength').dimensionality

logger.debug("Defined custom unit 'wavelength' with dimensionality %s", WAVELENGTH_DIMENSIONALITY)


def _to_magnitude(value: Union[int, float, str], unit: str) -> float:
    if isinstance(value, bool):
        raise TypeError(f"Expected a number or quantity string, got boolean {value!r}.")
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise TypeError(f"Expected a number or quantity string, got {type(value).__name__}.")
    quantity = Quantity(value)
    # A bare number carries no unit and is taken to already be in the target unit.
    # Converting it instead would treat "90" as 90 radians when asking for degrees.
    if quantity.unitless:
        return float(quantity.magnitude)
    return float(quantity.to(unit).magnitude)


def to_wavelengths(value: Union[int, float, str]) -> float:
    """
    Converts a number or a quantity string (e.g. "0.5 wavelength", "2 wl") to a
    float in wavelengths.

    Raises:
        pint.DimensionalityError: If the quantity is not an electrical length.
        pint.UndefinedUnitError: If the string references an unknown unit.
        TypeError: If the value is neither a number nor a string.
    """
    return _to_magnitude(value, 'wavelength')


def to_degrees(value: Union[int, float, str]) -> float:
    """Converts a number or an angle quantity string (e.g. "90 deg", "1.5 rad") to degrees."""
    return _to_magnitude(value, 'degree')
