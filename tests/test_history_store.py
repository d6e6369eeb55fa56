"""
Tests for the bounded, persisted history.
"""
import json

from shortener_client.exceptions import StorageError
from shortener_client.schemas.link import HistoryEntry
from shortener_client.services.history_store import HistoryStore
from shortener_client.storage.strategies import InMemoryBlobStore


def make_entry(n: int) -> HistoryEntry:
    return HistoryEntry(
        long_url=f"https://example.com/{n}",
        short_url=f"https://sho.rt/{n}",
        created_at=1_700_000_000_000 + n,
        expires_at=1_700_001_800_000 + n,
        validity_minutes=30,
    )


class BrokenBlobStore(InMemoryBlobStore):
    """Blob store whose medium always fails"""

    def get(self, key):
        raise StorageError("disk on fire")

    def set(self, key, value):
        raise StorageError("disk on fire")


class TestRecord:
    """Test recording and eviction"""

    def test_newest_first(self, history):
        history.record(make_entry(1))
        history.record(make_entry(2))

        assert [e.short_url for e in history.entries] == [
            "https://sho.rt/2",
            "https://sho.rt/1",
        ]

    def test_21st_entry_evicts_oldest(self, history):
        for n in range(1, 22):
            history.record(make_entry(n))

        entries = history.entries
        assert len(entries) == 20
        assert entries[0] == make_entry(21)
        assert make_entry(1) not in entries
        assert entries[-1] == make_entry(2)

    def test_custom_capacity(self, blob_store):
        history = HistoryStore(blob_store, capacity=3)
        for n in range(5):
            history.record(make_entry(n))

        assert [e.short_url for e in history.entries] == [
            "https://sho.rt/4",
            "https://sho.rt/3",
            "https://sho.rt/2",
        ]

    def test_persists_camel_case_blob(self, history, blob_store):
        history.record(make_entry(1))

        stored = json.loads(blob_store.get("url_history"))
        assert stored == [{
            "longUrl": "https://example.com/1",
            "shortUrl": "https://sho.rt/1",
            "createdAt": 1_700_000_000_001,
            "expiresAt": 1_700_001_800_001,
            "validityMinutes": 30,
        }]

    def test_entries_is_a_copy(self, history):
        history.record(make_entry(1))
        history.entries.clear()
        assert len(history) == 1


class TestLoad:
    """Test rehydration from the blob store"""

    def test_round_trip_after_reload(self, history, blob_store):
        for n in range(5):
            history.record(make_entry(n))

        reloaded = HistoryStore(blob_store)
        assert reloaded.load() == history.entries

    def test_missing_key_is_empty(self, history):
        assert history.load() == []

    def test_malformed_json_is_empty(self, blob_store):
        blob_store.set("url_history", "{not json")
        assert HistoryStore(blob_store).load() == []

    def test_wrong_shape_is_empty(self, blob_store):
        blob_store.set("url_history", json.dumps({"shortUrl": "x"}))
        assert HistoryStore(blob_store).load() == []

    def test_invalid_entry_is_skipped(self, blob_store):
        stored = [make_entry(n).model_dump(by_alias=True) for n in range(5)]
        stored.insert(2, {**stored[0], "expiresAt": None})
        blob_store.set("url_history", json.dumps(stored))

        entries = HistoryStore(blob_store).load()

        assert entries == [make_entry(n) for n in range(5)]

    def test_accepts_blob_written_by_browser_client(self, blob_store):
        blob_store.set("url_history", json.dumps([{
            "longUrl": "https://example.com/",
            "shortUrl": "https://sho.rt/x",
            "createdAt": 1,
            "expiresAt": 2,
            "validityMinutes": 30,
        }]))

        entries = HistoryStore(blob_store).load()
        assert entries[0].short_url == "https://sho.rt/x"

    def test_storage_fault_is_empty(self):
        assert HistoryStore(BrokenBlobStore()).load() == []


class TestClear:
    """Test clearing"""

    def test_clear_then_load_is_empty(self, history, blob_store):
        history.record(make_entry(1))
        history.clear()

        assert history.entries == []
        assert HistoryStore(blob_store).load() == []


class TestBestEffortPersistence:
    """Persistence failures never reach the caller"""

    def test_record_keeps_memory_state(self):
        history = HistoryStore(BrokenBlobStore())
        history.record(make_entry(1))
        assert history.entries == [make_entry(1)]

    def test_clear_keeps_memory_state(self):
        history = HistoryStore(BrokenBlobStore())
        history.record(make_entry(1))
        history.clear()
        assert history.entries == []
