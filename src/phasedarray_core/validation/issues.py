# src/phasedarray_core/validation/issues.py
import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class ValidationIssueLevel(Enum):
    """Severity level of a validation issue."""
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    def __str__(self):
        return self.value


@dataclass
class ValidationIssue:
    """
    Represents a single issue found while checking an array state before a tick.
    `element_index` points at the offending element where there is one.
    """
    level: ValidationIssueLevel
    code: str
    message: str
    element_index: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.level.name} - {self.code}]"]
        if self.element_index is not None:
            parts.append(f"Element: #{self.element_index}")
        parts.append(f"Message: {self.message}")

        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in sorted(self.details.items()))
            parts.append(f"Details: ({details_str})")

        return " ".join(parts)
