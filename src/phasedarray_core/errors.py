# src/phasedarray_core/errors.py
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class PhasedArrayError(Exception):
    """Base class for all custom, user-facing errors in phasedarray_core."""
    pass

class ConfigurationLoadError(PhasedArrayError):
    """
    Raised when a saved array configuration cannot be imported. The message is a
    pre-formatted, user-friendly diagnostic report. The caller's current element and
    target state is never touched when this is raised.
    """
    pass

class SimulationRunError(PhasedArrayError):
    """
    Raised when a simulation tick fails, for example because the array state holds
    non-finite coordinates or the wave speed is out of range.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    Concrete base class for all internal exceptions that are diagnosable.

    It inherits from `Exception`, so it can be used in `except` clauses, and declares
    `get_diagnostic_report` abstract so every subclass has to provide a report.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Formats the final multi-line report string so that all user-facing diagnostics
    share the same look.

    Args:
        error_type: The high-level category of the error (e.g., "YAML Schema Validation Error").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: A dictionary of contextual information (source file, element, time, speed).

    Returns:
        A formatted, user-friendly diagnostic report string ready for display.
    """
    lines = [
        "\n",
        "============= phasedarray_core: Actionable Diagnostic Report =============",
        f"Error Type:     {error_type}",
    ]
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if element := context.get('element'):
        lines.append(f"Element:        {element}")
    if (time := context.get('time')) is not None:
        lines.append(f"Time:           {time}")
    if (speed := context.get('speed')) is not None:
        lines.append(f"Wave Speed:     {speed} wavelength/s")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("==========================================================================")
    return "\n".join(lines)
