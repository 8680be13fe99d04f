# src/phasedarray_core/validation/__init__.py
import logging
logger = logging.getLogger(__name__)

from .issues import ValidationIssue, ValidationIssueLevel
from .issue_codes import ArrayIssueCode
from .array_validator import ArrayStateValidator
from .exceptions import ArrayStateValidationError

__all__ = [
    "ValidationIssue",
    "ValidationIssueLevel",
    "ArrayIssueCode",
    "ArrayStateValidator",
    "ArrayStateValidationError",
]
