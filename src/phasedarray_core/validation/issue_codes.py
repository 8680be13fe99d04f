# src/phasedarray_core/validation/issue_codes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ArrayIssueCode(Enum):
    """
    Registry of array-state issue codes and their message templates.
    Each enum member's value is a tuple: (code_str, message_template_str).
    """

    # --- Element Issues (ELEM_...) ---
    ELEM_NONFINITE = ("ELEM_NONFINITE", "Element #{index} has a non-finite {field_name} ({value}).")
    ELEM_DUPLICATE = ("ELEM_DUPLICATE", "Elements #{first_index} and #{second_index} share the position ({x}, {y}).")

    # --- Target Issues (TARGET_...) ---
    TARGET_NONFINITE = ("TARGET_NONFINITE", "The steering target has a non-finite {field_name} ({value}).")
    TARGET_AT_CENTROID = ("TARGET_AT_CENTROID", "The steering target ({x}, {y}) coincides with the array centroid; steering will be skipped.")

    # --- Animation Issues (SPEED_...) ---
    SPEED_RANGE = ("SPEED_RANGE", "Wave speed {speed} is outside the supported range [{min_speed}, {max_speed}] wavelength/s.")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]

    def format_message(self, **kwargs) -> str:
        """Formats the message template with provided keyword arguments."""
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing key {e} for formatting message template of {self.name} (code: {self.code}): '{self.template}'. Provided args: {kwargs}")
            return f"Error formatting message for {self.code}: Missing key {e}. Template: '{self.template}' Args: {kwargs}"
