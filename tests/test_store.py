# tests/test_store.py
import json

import pytest

from phasedarray_core import Configuration, ConfigurationStore, Element, Point, ParsingError, SchemaValidationError


@pytest.fixture
def store(tmp_path):
    return ConfigurationStore(tmp_path / "configs" / "phaseArrayConfigurations.json")


class TestConfigurationStore:

    def test_missing_store_is_empty(self, store):
        assert store.load_all() == []

    def test_save_appends_in_order(self, store):
        first = Configuration("first", (Element(0, 0),))
        second = Configuration("second", (Element(-1, 0), Element(1, 0, 90)), Point(2, 2))
        store.save(first)
        store.save(second)
        assert store.load_all() == [first, second]

    def test_store_is_a_json_array(self, store):
        store.save(Configuration("only", (Element(0.5, 0.5, 10),), None))
        records = json.loads(store.path.read_text())
        assert records == [{"name": "only", "antennas": [{"x": 0.5, "y": 0.5, "phase": 10.0}], "target": None}]

    def test_corrupt_store_raises(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        with pytest.raises(ParsingError):
            store.load_all()

    def test_non_array_store_raises(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"name": "x"}')
        with pytest.raises(ParsingError):
            store.load_all()

    def test_invalid_record_raises_schema_error(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('[{"name": "x", "antennas": [{"x": 1}]}]')
        with pytest.raises(SchemaValidationError):
            store.load_all()

    def test_failed_save_keeps_previous_contents(self, store):
        store.save(Configuration("kept", ()))
        before = store.path.read_text()
        store.path.write_text(before[:-3])  # Corrupt it so the next save cannot read it.
        with pytest.raises(ParsingError):
            store.save(Configuration("lost", ()))
        assert store.path.read_text() == before[:-3]

    def test_non_finite_record_is_rejected(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('[{"name": "x", "antennas": [{"x": NaN, "y": 0}], "target": null}]')
        with pytest.raises(SchemaValidationError) as excinfo:
            store.load_all()
        assert "must be a finite number" in str(excinfo.value)
