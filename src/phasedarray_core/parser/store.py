# src/phasedarray_core/parser/store.py
"""
A JSON file holding a list of saved configurations, the desktop counterpart of the
browser's local storage.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from ..data_structures import Configuration
from .exceptions import ParsingError
from .parser import ConfigurationParser, configuration_to_dict

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """
    Appends configurations to a JSON array on disk and reads them back.

    Every record is validated with the same schema as a YAML import. Writes go to a
    temporary file that replaces the store, so a failed save leaves the previous
    contents intact.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._parser = ConfigurationParser()

    def load_all(self) -> List[Configuration]:
        """Returns every stored configuration, or an empty list if the store does not exist yet."""
        if not self.path.exists():
            logger.debug(f"Configuration store {self.path} does not exist yet; returning no configurations.")
            return []
        records = self._read_records()
        return [self._parser.parse_mapping(record, self.path) for record in records]

    def save(self, config: Configuration):
        """Appends `config` to the store."""
        records = self._read_records() if self.path.exists() else []
        records.append(configuration_to_dict(config))
        self._write_records(records)
        logger.info(f"Saved configuration '{config.name}' to {self.path} ({len(records)} stored).")

    def _read_records(self) -> list:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                records = json.load(f)
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read store: {e}", file_path=self.path) from e
        except json.JSONDecodeError as e:
            raise ParsingError(details=f"Invalid JSON in configuration store: {e}", file_path=self.path) from e
        if not isinstance(records, list):
            raise ParsingError(details="The configuration store must contain a JSON array.", file_path=self.path)
        return records

    def _write_records(self, records: list):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ParsingError(details=f"Could not write configuration store: {e}", file_path=self.path) from e
