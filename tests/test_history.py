import json

import config
from services.history import HistoryEntry, JsonFileHistoryStore, MemoryHistoryStore, make_label
from services.models import AdItem

AD = AdItem(title="T", description="D", cta="C")


def test_append_is_newest_first_and_bounded():
    store = MemoryHistoryStore(limit=100)
    for i in range(105):
        store.append(HistoryEntry(label=f"entry {i}", ads=[AD]))
    entries = store.load()
    assert len(entries) == 100
    assert entries[0].label == "entry 104"
    assert entries[-1].label == "entry 5"


def test_entries_get_id_and_timestamp():
    a = HistoryEntry(label="a")
    b = HistoryEntry(label="b")
    assert a.id != b.id
    assert a.created_at > 0


def test_json_file_round_trip_uses_client_keys(tmp_path):
    path = tmp_path / "nested" / "history.json"
    store = JsonFileHistoryStore(str(path))
    store.append(HistoryEntry(label="shop.example.com", ads=[AD], url="https://shop.example.com", custom_prompt="Be bold"))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data[0]) == {"id", "createdAt", "label", "ads", "url", "customPrompt"}

    loaded = JsonFileHistoryStore(str(path)).load()
    assert loaded[0].custom_prompt == "Be bold"
    assert loaded[0].ads == [AD]


def test_optional_fields_are_omitted(tmp_path):
    path = tmp_path / "history.json"
    JsonFileHistoryStore(str(path)).append(HistoryEntry(label="Variations: T", ads=[AD]))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert "url" not in data[0]
    assert "customPrompt" not in data[0]


def test_clear(tmp_path):
    store = JsonFileHistoryStore(str(tmp_path / "history.json"))
    store.append(HistoryEntry(label="x"))
    store.clear()
    assert store.load() == []


def test_missing_or_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "history.json"
    store = JsonFileHistoryStore(str(path))
    assert store.load() == []
    path.write_text("{not json", encoding="utf-8")
    assert store.load() == []
    path.write_text('{"an": "object"}', encoding="utf-8")
    assert store.load() == []


def test_labels():
    assert make_label(url="https://www.shop.example.com/p/1") == "shop.example.com"
    assert make_label(variant_of=AdItem(title="A" * 40, description="D", cta="C")) == "Variations: " + "A" * 24
    assert make_label(target_language="German") == "Translation to German"


def test_invalid_entry_does_not_wipe_valid_history(tmp_path):
    path = tmp_path / "history.json"
    store = JsonFileHistoryStore(str(path))
    for i in range(5):
        store.append(HistoryEntry(label=f"batch {i}", ads=[AD]))
    data = json.loads(path.read_text(encoding="utf-8"))
    data.insert(2, {"id": "hand-edited", "ads": []})
    path.write_text(json.dumps(data), encoding="utf-8")

    assert [e.label for e in store.load()] == ["batch 4", "batch 3", "batch 2", "batch 1", "batch 0"]

    store.append(HistoryEntry(label="new"))
    labels = [e["label"] for e in json.loads(path.read_text(encoding="utf-8"))]
    assert labels == ["new", "batch 4", "batch 3", "batch 2", "batch 1", "batch 0"]


def test_default_limit_comes_from_config(tmp_path):
    assert MemoryHistoryStore().limit == config.HISTORY_LIMIT
    assert JsonFileHistoryStore(str(tmp_path / "h.json")).limit == config.HISTORY_LIMIT
