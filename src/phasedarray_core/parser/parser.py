# src/phasedarray_core/parser/parser.py
import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional, Union

import cerberus
import pint
import yaml

from ..data_structures import Configuration, Element, Point
from ..errors import ConfigurationLoadError, DiagnosableError
from ..units import Quantity, to_degrees, to_wavelengths
from .exceptions import ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

STRING_SOURCE = Path("<string>")


class EnhancedValidator(cerberus.Validator):
    """Cerberus validator with a rule for numbers or pint quantity strings."""

    def _validate_quantity(self, unit: str, field: str, value: Any):
        """
        Validates that a value is a finite number or a quantity string convertible to
        `unit` with a finite magnitude. Bare numbers are taken to already be in `unit`.
        The rule's arguments are validated against this schema:
        {'type': 'string'}
        """
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return  # Let the 'type' rule report this.
        if not isinstance(value, str):
            if not math.isfinite(value):
                self._error(field, f"Value {value!r} must be a finite number.")
            return
        try:
            quantity = Quantity(value)
            magnitude = quantity.magnitude if quantity.unitless else quantity.to(unit).magnitude
        except pint.DimensionalityError:
            self._error(field, f"Quantity '{value}' cannot be expressed in '{unit}'.")
            return
        except (pint.PintError, ValueError, TypeError, AttributeError, SyntaxError) as e:
            self._error(field, f"'{value}' is not a valid quantity: {e}")
            return
        try:
            finite = math.isfinite(float(magnitude))
        except (TypeError, ValueError):
            finite = False
        if not finite:
            self._error(field, f"Quantity '{value}' must have a finite magnitude.")


class ConfigurationParser:
    """
    Loads, validates and writes named array configurations as YAML.

    A document is validated in full before any `Configuration` is built, so a
    failed import never yields a partially applied layout.
    """
    _coordinate_rule = {"type": ["number", "string"], "required": True, "quantity": "wavelength"}

    _schema = {
        "name": {"type": "string", "required": True, "empty": False},
        "antennas": {
            "type": "list", "required": True,
            "schema": {"type": "dict", "schema": {
                "x": _coordinate_rule,
                "y": _coordinate_rule,
                "phase": {"type": ["number", "string"], "required": False, "quantity": "degree"},
            }},
        },
        "target": {
            "type": "dict", "required": False, "nullable": True, "default": None,
            "schema": {"x": _coordinate_rule, "y": _coordinate_rule},
        },
    }

    def __init__(self):
        self._validator = EnhancedValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("ConfigurationParser initialized with strict structural validation rules.")

    def parse_file(self, yaml_path: Union[str, Path]) -> Configuration:
        """Parses a YAML configuration file."""
        resolved_path = Path(yaml_path).resolve()
        logger.info(f"Importing array configuration from: {resolved_path}")
        content = self._load_yaml(resolved_path)
        return self.parse_mapping(content, resolved_path)

    def parse_string(self, text: str, source: Path = STRING_SOURCE) -> Configuration:
        """Parses a YAML configuration held in memory."""
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        return self.parse_mapping(self._check_root(content, source), source)

    def parse_mapping(self, content: Any, source: Path = STRING_SOURCE) -> Configuration:
        """Validates an already-loaded document and builds the Configuration."""
        content = self._check_root(content, source)
        if not self._validator.validate(content):
            raise SchemaValidationError(self._validator.errors, source)

        validated = self._validator.document
        try:
            antennas = tuple(
                Element(
                    to_wavelengths(raw["x"]),
                    to_wavelengths(raw["y"]),
                    to_degrees(raw.get("phase", 0.0)),
                )
                for raw in validated["antennas"]
            )
            raw_target = validated.get("target")
            target = None if raw_target is None else Point(to_wavelengths(raw_target["x"]), to_wavelengths(raw_target["y"]))
        except (pint.PintError, TypeError, ValueError) as e:
            raise ParsingError(details=f"Could not convert configuration values: {e}", file_path=source) from e

        config = Configuration(name=validated["name"], antennas=antennas, target=target)
        logger.debug(f"Parsed configuration '{config.name}' with {len(antennas)} antenna(s).")
        return config

    def dump_to_file(self, config: Configuration, directory: Union[str, Path], file_name: Optional[str] = None) -> Path:
        """
        Writes the configuration as YAML into `directory`, named `<config.name>.yaml`
        unless `file_name` is given. Returns the written path.
        """
        target_path = Path(directory) / (file_name or f"{config.name}.yaml")
        try:
            with target_path.open("w", encoding="utf-8") as f:
                f.write(dump_configuration_yaml(config))
        except OSError as e:
            raise ParsingError(details=f"Could not write configuration: {e}", file_path=target_path) from e
        logger.info(f"Exported array configuration '{config.name}' to: {target_path}")
        return target_path

    @staticmethod
    def _check_root(content: Any, source: Path) -> Dict[str, Any]:
        if content is None:
            raise ParsingError(details="The YAML document is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the configuration must be a dictionary (mapping).", file_path=source)
        return content

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise ParsingError(details=f"Configuration file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        return self._check_root(content, source)


def configuration_to_dict(config: Configuration) -> Dict[str, Any]:
    """Plain-data form of a configuration, shared by the YAML and JSON writers."""
    return {
        "name": config.name,
        "antennas": [{"x": a.x, "y": a.y, "phase": a.phase} for a in config.antennas],
        "target": None if config.target is None else {"x": config.target.x, "y": config.target.y},
    }


def dump_configuration_yaml(config: Configuration) -> str:
    return yaml.safe_dump(configuration_to_dict(config), sort_keys=False)


def load_configuration(yaml_path: Union[str, Path]) -> Configuration:
    """
    User-facing import: parses a YAML configuration file or raises a single
    `ConfigurationLoadError` carrying the diagnostic report.
    """
    try:
        return ConfigurationParser().parse_file(yaml_path)
    except DiagnosableError as e:
        logger.error(f"Configuration import failed: {e}")
        raise ConfigurationLoadError(e.get_diagnostic_report()) from e
