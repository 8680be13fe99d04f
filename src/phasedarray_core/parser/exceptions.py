# src/phasedarray_core/parser/exceptions.py
"""
Defines diagnosable exceptions for configuration import and storage.

`ParsingError` covers file-level problems (missing file, permissions, invalid YAML
or JSON syntax, wrong root type). `SchemaValidationError` covers documents that
load fine but do not match the configuration schema. Both derive from
`DiagnosableError`, so the import facade can turn either into a single
user-facing `ConfigurationLoadError`.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """
    A local, concrete base class for all configuration parsing and schema errors.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the configuration file.",
            context={}
        )


@dataclass(frozen=True)
class ParsingError(BaseParsingError):
    """
    Raised for file-system issues or documents that cannot be loaded at all.
    """
    details: str
    file_path: Path

    def __str__(self):
        return f"Parsing error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Configuration File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains valid YAML (or JSON for the configuration store).",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class SchemaValidationError(BaseParsingError):
    """
    Raised when a loaded document does not conform to the configuration schema
    (missing name, antennas without coordinates, unknown keys, wrong units).
    """
    errors: Dict[str, Any]
    file_path: Path

    @staticmethod
    def _flatten(errors: Any, prefix: str = "") -> list:
        # Cerberus nests errors as {field: [message | {subfield: [...]}, ...]}.
        lines = []
        if isinstance(errors, dict):
            for key, value in sorted(errors.items(), key=lambda kv: str(kv[0])):
                path = f"{prefix}.{key}" if prefix else str(key)
                lines.extend(SchemaValidationError._flatten(value, path))
        elif isinstance(errors, list):
            for item in errors:
                lines.extend(SchemaValidationError._flatten(item, prefix))
        else:
            lines.append(f"Field '{prefix}': {errors}")
        return lines

    def error_lines(self) -> list:
        return self._flatten(self.errors)

    def __str__(self):
        return (
            f"Configuration schema validation failed for '{self.file_path}':\n"
            + "\n".join(f"  - {line}" for line in self.error_lines())
        )

    def get_diagnostic_report(self) -> str:
        lines = self.error_lines()
        details = (
            "The structure of the configuration does not conform to the required schema.\n"
            f"See details for {len(lines)} issue(s) below:\n\n"
            + "\n".join(f"  - {line}" for line in lines)
        )
        return format_diagnostic_report(
            error_type="Configuration Schema Validation Error",
            details=details,
            suggestion="A configuration needs a non-empty 'name', an 'antennas' list of entries with 'x' and 'y' (and optional 'phase'), and an optional 'target' with 'x' and 'y'. Coordinates are numbers in wavelengths or quantities such as '0.5 wavelength'; phases are degrees or quantities such as '90 deg'.",
            context={'source_file': self.file_path}
        )
