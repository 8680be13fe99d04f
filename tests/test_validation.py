# tests/test_validation.py
import pytest

from phasedarray_core import (
    Element, Point, ArrayStateValidator, ArrayStateValidationError,
    ValidationIssue, ValidationIssueLevel,
)
from phasedarray_core.validation import ArrayIssueCode


def _codes(issues):
    return [issue.code for issue in issues]


class TestArrayStateValidator:

    def test_clean_state_has_no_issues(self, two_element_array):
        assert ArrayStateValidator(two_element_array, Point(1.0, 5.0), 2.0).validate() == []

    def test_non_finite_element_is_an_error(self):
        issues = ArrayStateValidator([Element(0, 0), Element(float('nan'), 1.0)], None, 1.0).validate()
        assert _codes(issues) == ["ELEM_NONFINITE"]
        assert issues[0].level == ValidationIssueLevel.ERROR
        assert issues[0].element_index == 1

    def test_non_finite_phase_is_an_error(self):
        issues = ArrayStateValidator([Element(0, 0, float('inf'))], None).validate()
        assert _codes(issues) == ["ELEM_NONFINITE"]

    def test_non_finite_target_is_an_error(self, two_element_array):
        issues = ArrayStateValidator(two_element_array, Point(float('inf'), 0.0)).validate()
        assert _codes(issues) == ["TARGET_NONFINITE"]

    @pytest.mark.parametrize("speed", [0.0, 0.05, 5.1, float('nan')])
    def test_speed_out_of_range(self, two_element_array, speed):
        issues = ArrayStateValidator(two_element_array, None, speed).validate()
        assert _codes(issues) == ["SPEED_RANGE"]

    @pytest.mark.parametrize("speed", [0.1, 2.0, 5.0])
    def test_speed_bounds_are_inclusive(self, two_element_array, speed):
        assert ArrayStateValidator(two_element_array, None, speed).validate() == []

    def test_stacked_elements_warn(self):
        issues = ArrayStateValidator([Element(1, 1), Element(2, 2), Element(1, 1, 90)], None).validate()
        assert _codes(issues) == ["ELEM_DUPLICATE"]
        assert issues[0].level == ValidationIssueLevel.WARNING
        assert issues[0].details["first_index"] == 0
        assert issues[0].details["second_index"] == 2

    def test_target_on_centroid_is_informational(self, two_element_array):
        issues = ArrayStateValidator(two_element_array, Point(0.0, 0.0)).validate()
        assert _codes(issues) == ["TARGET_AT_CENTROID"]
        assert issues[0].level == ValidationIssueLevel.INFO


class TestArrayStateValidationError:

    def test_keeps_only_errors_and_reports_them(self):
        issues = ArrayStateValidator(
            [Element(0, 0), Element(0, 0), Element(float('nan'), 0)], None, 9.0
        ).validate()
        error = ArrayStateValidationError(issues)
        assert {issue.code for issue in error.issues} == {"ELEM_NONFINITE", "SPEED_RANGE"}
        report = error.get_diagnostic_report()
        assert "Array State Validation Error" in report
        assert "ELEM_NONFINITE" in report
        assert "SPEED_RANGE" in report
        assert "ELEM_DUPLICATE" not in report

    def test_issue_string_format(self):
        issue = ValidationIssue(
            level=ValidationIssueLevel.ERROR,
            code=ArrayIssueCode.SPEED_RANGE.code,
            message=ArrayIssueCode.SPEED_RANGE.format_message(speed=9, min_speed=0.1, max_speed=5.0),
            details={"speed": 9},
        )
        assert str(issue) == (
            "[ERROR - SPEED_RANGE] Message: Wave speed 9 is outside the supported range "
            "[0.1, 5.0] wavelength/s. Details: (speed=9)"
        )

    def test_missing_template_key_is_reported_not_raised(self):
        message = ArrayIssueCode.SPEED_RANGE.format_message(speed=1)
        assert "Missing key" in message
