"""
Bounded, persisted history of successful shortenings.

Entries are kept newest first. The in-memory list is authoritative for the
session; the blob store is a best-effort mirror written after every
mutation and read once at startup.
"""

import json
import logging
from typing import List

from pydantic import TypeAdapter, ValidationError

from shortener_client.exceptions import StorageError
from shortener_client.schemas.link import HistoryEntry
from shortener_client.storage.strategies import BlobStoreStrategy


logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20
DEFAULT_STORAGE_KEY = "url_history"

_entries_adapter = TypeAdapter(List[HistoryEntry])


class HistoryStore:
    """
    History cache with FIFO-by-recency eviction.
    
    Recording entry number capacity + 1 drops the oldest one (the tail).
    Reading entries does not reorder them.
    """
    
    def __init__(
        self,
        blob_store: BlobStoreStrategy,
        key: str = DEFAULT_STORAGE_KEY,
        capacity: int = DEFAULT_CAPACITY,
    ):
        """
        Args:
            blob_store: Persistence medium for the serialized collection
            key: Blob key the collection is stored under
            capacity: Maximum number of entries kept
        """
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self.blob_store = blob_store
        self.key = key
        self.capacity = capacity
        self._entries: List[HistoryEntry] = []
    
    @property
    def entries(self) -> List[HistoryEntry]:
        """Copy of the collection, newest first"""
        return list(self._entries)
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def load(self) -> List[HistoryEntry]:
        """
        Rehydrate the collection from the blob store.
        
        A missing key, a malformed blob or a storage fault all yield an
        empty collection; nothing is raised.
        """
        self._entries = self._read()[:self.capacity]
        return self.entries
    
    def record(self, entry: HistoryEntry) -> None:
        """Prepend entry, drop overflow from the tail, persist"""
        self._entries = [entry, *self._entries][:self.capacity]
        self._persist()
    
    def clear(self) -> None:
        """Empty the collection and persist the empty state"""
        self._entries = []
        self._persist()
    
    def _read(self) -> List[HistoryEntry]:
        try:
            raw = self.blob_store.get(self.key)
        except StorageError as e:
            logger.warning("History could not be read, starting empty: %s", e)
            return []
        
        if not raw:
            return []
        
        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning("Stored history is malformed, starting empty: %s", e)
            return []
        if not isinstance(items, list):
            logger.warning("Stored history is not a list, starting empty")
            return []
        
        # Invalid entries (e.g. a null expiresAt) are skipped one by one
        entries = []
        for item in items:
            try:
                entries.append(HistoryEntry.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed history entry: %s", e)
        return entries
    
    def _persist(self) -> None:
        # Failure here is expected on read-only or full media and is not
        # fatal: the in-memory collection stays authoritative.
        blob = _entries_adapter.dump_json(self._entries, by_alias=True).decode("utf-8")
        try:
            self.blob_store.set(self.key, blob)
        except StorageError as e:
            logger.warning("History could not be persisted: %s", e)
