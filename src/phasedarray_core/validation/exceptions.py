# src/phasedarray_core/validation/exceptions.py
"""
Defines the diagnosable exception raised when an array state fails validation.
"""
from typing import List

from .issues import ValidationIssue, ValidationIssueLevel
from ..errors import DiagnosableError, format_diagnostic_report


class ArrayStateValidationError(DiagnosableError):
    """
    Raised when the `ArrayStateValidator` reports one or more ERROR-level issues.
    Only the error-level issues are kept and reported.
    """
    def __init__(self, issues: List[ValidationIssue]):
        self.issues: List[ValidationIssue] = [
            issue for issue in issues if issue.level == ValidationIssueLevel.ERROR
        ]
        if not self.issues:
            summary_message = "ArrayStateValidationError was raised with no error-level issues."
        else:
            summary_message = (
                f"Array state validation failed with {len(self.issues)} error(s):\n"
                + "\n".join(f"  - {issue}" for issue in self.issues)
            )
        super().__init__(summary_message)

    def get_diagnostic_report(self) -> str:
        details = (
            f"The element layout, target or wave speed cannot be simulated.\n"
            f"Found {len(self.issues)} error(s). See details below:\n\n"
            + "\n".join(f"  - {issue}" for issue in self.issues)
        )
        context = {}
        first_issue = self.issues[0] if self.issues else None
        if first_issue is not None:
            if first_issue.element_index is not None:
                context['element'] = f"#{first_issue.element_index}"
            if (speed := first_issue.details.get('speed')) is not None:
                context['speed'] = speed

        return format_diagnostic_report(
            error_type="Array State Validation Error",
            details=details,
            suggestion="Fix the listed elements or settings. Positions and phases must be finite numbers and the wave speed must lie within the supported range.",
            context=context
        )
