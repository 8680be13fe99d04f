# src/phasedarray_core/validation/array_validator.py
import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..constants import MAX_SPEED, MIN_SPEED
from ..data_structures import Element, Point
from ..geometry import centroid, direction_vector
from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import ArrayIssueCode

logger = logging.getLogger(__name__)


class ArrayStateValidator:
    """
    Checks an element layout, steering target and wave speed before they reach the
    numeric core.

    The core functions are total over finite inputs, so the ERROR-level checks here
    are exactly the conditions that would otherwise leak NaN into a frame. Degenerate
    but valid geometry (a target on the centroid, stacked elements) is reported at
    a lower level because the core has a defined fallback for it.
    """

    def __init__(self, elements: Sequence[Element], target: Optional[Point], speed: Optional[float] = None):
        self.elements = list(elements)
        self.target = target
        self.speed = speed
        self.issues: List[ValidationIssue] = []

    def validate(self) -> List[ValidationIssue]:
        """
        Runs every check and returns all issues found (errors, warnings, and info).
        The caller decides whether ERROR-level issues stop the tick.
        """
        self.issues = []
        elements_finite = self._check_elements()
        target_finite = self._check_target()
        self._check_speed()
        self._check_duplicates()
        if elements_finite and target_finite:
            self._check_target_at_centroid()

        if self.issues:
            errors = sum(1 for i in self.issues if i.level == ValidationIssueLevel.ERROR)
            logger.info(f"Array state validation found {len(self.issues)} issue(s), {errors} error(s).")
        return self.issues

    def _add_issue(self, level: ValidationIssueLevel, code_enum: ArrayIssueCode, element_index: Optional[int] = None, **kwargs):
        self.issues.append(ValidationIssue(
            level=level,
            code=code_enum.code,
            message=code_enum.format_message(**kwargs),
            element_index=element_index,
            details=kwargs,
        ))

    def _check_elements(self) -> bool:
        all_finite = True
        for index, element in enumerate(self.elements):
            for field_name in ('x', 'y', 'phase'):
                value = getattr(element, field_name)
                if not math.isfinite(value):
                    all_finite = False
                    self._add_issue(
                        ValidationIssueLevel.ERROR, ArrayIssueCode.ELEM_NONFINITE,
                        element_index=index, index=index, field_name=field_name, value=value,
                    )
        return all_finite

    def _check_target(self) -> bool:
        if self.target is None:
            return True
        all_finite = True
        for field_name in ('x', 'y'):
            value = getattr(self.target, field_name)
            if not math.isfinite(value):
                all_finite = False
                self._add_issue(
                    ValidationIssueLevel.ERROR, ArrayIssueCode.TARGET_NONFINITE,
                    field_name=field_name, value=value,
                )
        return all_finite

    def _check_speed(self):
        if self.speed is None:
            return
        if not (math.isfinite(self.speed) and MIN_SPEED <= self.speed <= MAX_SPEED):
            self._add_issue(
                ValidationIssueLevel.ERROR, ArrayIssueCode.SPEED_RANGE,
                speed=self.speed, min_speed=MIN_SPEED, max_speed=MAX_SPEED,
            )

    def _check_duplicates(self):
        seen: Dict[Tuple[float, float], int] = {}
        for index, element in enumerate(self.elements):
            position = (element.x, element.y)
            if position in seen:
                self._add_issue(
                    ValidationIssueLevel.WARNING, ArrayIssueCode.ELEM_DUPLICATE,
                    element_index=index, first_index=seen[position], second_index=index,
                    x=element.x, y=element.y,
                )
            else:
                seen[position] = index

    def _check_target_at_centroid(self):
        if self.target is None or not self.elements:
            return
        if direction_vector(centroid(self.elements), self.target) is None:
            self._add_issue(
                ValidationIssueLevel.INFO, ArrayIssueCode.TARGET_AT_CENTROID,
                x=self.target.x, y=self.target.y,
            )
