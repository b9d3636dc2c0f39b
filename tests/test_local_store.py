"""Tests for the durable key-value stores."""

import json

from assessment_app.core.services.local_store import InMemoryStore, JsonFileStore


def test_in_memory_store_round_trip():
    store = InMemoryStore()

    store.set_item("key", "value")
    assert store.get_item("key") == "value"

    store.remove_item("key")
    assert store.get_item("key") is None
    store.remove_item("key")


def test_read_json_returns_default_for_unparseable_value(caplog):
    store = InMemoryStore({"broken": "{not json"})

    assert store.read_json("broken", []) == []
    assert store.read_json("missing", {"a": 1}) == {"a": 1}
    assert "unparseable" in caplog.text


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "state.json"
    JsonFileStore(path).write_json("scores", [{"averageScore": 4.0}])

    reopened = JsonFileStore(path)

    assert reopened.read_json("scores", []) == [{"averageScore": 4.0}]
    document = json.loads(path.read_text(encoding="utf-8"))
    assert isinstance(document["scores"], str)
    assert not path.with_name("state.json.tmp").exists()


def test_json_file_store_remove_item(tmp_path):
    store = JsonFileStore(tmp_path / "state.json")
    store.set_item("a", "1")
    store.set_item("b", "2")

    store.remove_item("a")

    assert store.get_item("a") is None
    assert store.get_item("b") == "2"


def test_json_file_store_ignores_corrupt_file(tmp_path, caplog):
    path = tmp_path / "state.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    store = JsonFileStore(path)

    assert store.get_item("anything") is None
    store.set_item("fresh", "value")

    assert json.loads(path.read_text(encoding="utf-8")) == {"fresh": "value"}
    assert "expected a JSON object" in caplog.text


def test_json_file_store_non_string_values_read_as_missing(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"count": 3}), encoding="utf-8")

    assert JsonFileStore(path).get_item("count") is None
