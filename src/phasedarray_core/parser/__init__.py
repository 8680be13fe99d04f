# src/phasedarray_core/parser/__init__.py
from .parser import ConfigurationParser, dump_configuration_yaml, load_configuration
from .store import ConfigurationStore
from .exceptions import ParsingError, SchemaValidationError

__all__ = [
    # Parser and Store
    "ConfigurationParser",
    "ConfigurationStore",
    "dump_configuration_yaml",
    "load_configuration",
    # Exceptions
    "ParsingError",
    "SchemaValidationError",
]
