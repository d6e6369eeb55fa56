"""
Blob store strategies using Strategy Pattern.

The history is persisted as a single keyed blob. These backends are the
persistence medium: plain get/set/delete/clear on string values, with no
knowledge of what the blob contains.

Every backend re-raises its own failures as StorageError so callers have
one exception type to handle.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import redis
from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shortener_client.database.connection import Base
from shortener_client.exceptions import StorageError
from shortener_client.models.blob import StoredBlob


class BlobStoreStrategy(ABC):
    """
    Abstract base class for blob stores.
    
    Operations are synchronous: a mutation is persisted before the call
    that triggered it returns.
    """
    
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a blob.
        
        Args:
            key: Blob key
            
        Returns:
            Stored value or None if the key is missing
        """
        pass
    
    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write (or overwrite) a blob"""
        pass
    
    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove a blob.
        
        Returns:
            True if deleted, False if the key didn't exist
        """
        pass
    
    @abstractmethod
    def clear(self) -> None:
        """Remove every blob"""
        pass


class InMemoryBlobStore(BlobStoreStrategy):
    """
    Dict-backed store.
    
    Lost on restart. Used in development and tests.
    """
    
    def __init__(self):
        self._blobs: Dict[str, str] = {}
    
    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)
    
    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value
    
    def delete(self, key: str) -> bool:
        if key in self._blobs:
            del self._blobs[key]
            return True
        return False
    
    def clear(self) -> None:
        self._blobs.clear()


class FileBlobStore(BlobStoreStrategy):
    """
    JSON file on disk mapping key -> blob.
    
    The desktop analogue of browser local storage. Writes go to a
    temporary file in the same directory and are moved into place, so a
    crash never leaves a half-written file behind.
    """
    
    def __init__(self, path: str = "url_history.json"):
        self.path = Path(path)
    
    def _read_all(self) -> Dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        
        try:
            blobs = json.loads(raw)
        except ValueError as e:
            raise StorageError(f"Corrupt blob file {self.path}: {e}") from e
        if not isinstance(blobs, dict):
            raise StorageError(f"Corrupt blob file {self.path}: expected an object")
        return blobs
    
    def _write_all(self, blobs: Dict[str, str]) -> None:
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(blobs, tmp)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
    
    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)
    
    def set(self, key: str, value: str) -> None:
        blobs = self._read_all()
        blobs[key] = value
        self._write_all(blobs)
    
    def delete(self, key: str) -> bool:
        blobs = self._read_all()
        if key not in blobs:
            return False
        del blobs[key]
        self._write_all(blobs)
        return True
    
    def clear(self) -> None:
        self._write_all({})


class RedisBlobStore(BlobStoreStrategy):
    """
    Redis implementation.
    
    Lets several client processes share one history. Blobs never expire.
    """
    
    def __init__(self, redis_client):
        """
        Initialize Redis blob store.
        
        Args:
            redis_client: Redis client instance (redis.Redis)
        """
        self.redis = redis_client
    
    def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(key)
        except redis.RedisError as e:
            raise StorageError(f"Redis get error: {e}") from e
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value
    
    def set(self, key: str, value: str) -> None:
        try:
            self.redis.set(key, value)
        except redis.RedisError as e:
            raise StorageError(f"Redis set error: {e}") from e
    
    def delete(self, key: str) -> bool:
        try:
            return bool(self.redis.delete(key))
        except redis.RedisError as e:
            raise StorageError(f"Redis delete error: {e}") from e
    
    def clear(self) -> None:
        """Clear the whole Redis database (use with caution!)"""
        try:
            self.redis.flushdb()
        except redis.RedisError as e:
            raise StorageError(f"Redis clear error: {e}") from e


class SQLBlobStore(BlobStoreStrategy):
    """
    SQLAlchemy implementation over the stored_blobs table.
    
    Any database SQLAlchemy supports works; SQLite by default.
    """
    
    def __init__(self, engine: Engine):
        self.engine = engine
        try:
            Base.metadata.create_all(bind=engine, tables=[StoredBlob.__table__])
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot create blob table: {e}") from e
    
    def get(self, key: str) -> Optional[str]:
        try:
            with Session(self.engine) as session:
                blob = session.get(StoredBlob, key)
                return blob.value if blob else None
        except SQLAlchemyError as e:
            raise StorageError(f"SQL get error: {e}") from e
    
    def set(self, key: str, value: str) -> None:
        try:
            with Session(self.engine) as session:
                blob = session.get(StoredBlob, key)
                if blob is None:
                    session.add(StoredBlob(key=key, value=value))
                else:
                    blob.value = value
                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"SQL set error: {e}") from e
    
    def delete(self, key: str) -> bool:
        try:
            with Session(self.engine) as session:
                result = session.execute(delete(StoredBlob).where(StoredBlob.key == key))
                session.commit()
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise StorageError(f"SQL delete error: {e}") from e
    
    def clear(self) -> None:
        try:
            with Session(self.engine) as session:
                session.execute(delete(StoredBlob))
                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"SQL clear error: {e}") from e


class NullBlobStore(BlobStoreStrategy):
    """
    Null Object Pattern - store that keeps nothing.
    
    History lives only for the current session.
    """
    
    def get(self, key: str) -> Optional[str]:
        """Always a miss"""
        return None
    
    def set(self, key: str, value: str) -> None:
        """Pretends to write but does nothing"""
        pass
    
    def delete(self, key: str) -> bool:
        return False
    
    def clear(self) -> None:
        pass
