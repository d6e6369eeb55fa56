"""
Factory for creating blob store instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum

import redis

from .strategies import (
    BlobStoreStrategy,
    FileBlobStore,
    InMemoryBlobStore,
    NullBlobStore,
    RedisBlobStore,
    SQLBlobStore,
)
from shortener_client.config import settings
from shortener_client.database.connection import engine
from shortener_client.exceptions import StorageError


logger = logging.getLogger(__name__)


class BlobStoreBackend(Enum):
    """Available blob store backends"""
    FILE = "file"
    MEMORY = "memory"
    REDIS = "redis"
    SQL = "sql"
    NULL = "null"


class BlobStoreFactory:
    """
    Simple factory for creating blob store instances.
    
    Uses Singleton Pattern - creates instance once, reuses it.
    Gets configuration from settings (not passed as parameters).
    """
    
    _instance: BlobStoreStrategy = None  # Single cached instance
    
    @classmethod
    def create(cls, backend: BlobStoreBackend) -> BlobStoreStrategy:
        """
        Create or return cached blob store instance.
        
        Args:
            backend: Type of blob store backend (from enum)
            
        Returns:
            Singleton blob store instance
        """
        if cls._instance is not None:
            return cls._instance
        
        if backend == BlobStoreBackend.FILE:
            cls._instance = FileBlobStore(path=settings.storage_file_path)
            logger.info("File blob store initialized at %s", settings.storage_file_path)
        
        elif backend == BlobStoreBackend.MEMORY:
            cls._instance = InMemoryBlobStore()
            logger.info("In-memory blob store initialized")
        
        elif backend == BlobStoreBackend.REDIS:
            try:
                redis_client = redis.from_url(
                    settings.redis_url,
                    decode_responses=True,
                    socket_connect_timeout=2,
                    socket_timeout=2,
                )
                
                # Test connection immediately
                redis_client.ping()
                
                cls._instance = RedisBlobStore(redis_client)
                logger.info("Redis blob store initialized")
            
            except (redis.RedisError, ValueError) as e:
                logger.warning("Redis connection failed (%s); falling back to in-memory blob store", e)
                cls._instance = InMemoryBlobStore()
        
        elif backend == BlobStoreBackend.SQL:
            try:
                cls._instance = SQLBlobStore(engine)
                logger.info("SQL blob store initialized")
            except StorageError as e:
                logger.warning("SQL blob store unavailable (%s); falling back to in-memory blob store", e)
                cls._instance = InMemoryBlobStore()
        
        elif backend == BlobStoreBackend.NULL:
            cls._instance = NullBlobStore()
            logger.info("Null blob store initialized (history will not persist)")
        
        else:
            raise ValueError(f"Unknown blob store backend: {backend}")
        
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
