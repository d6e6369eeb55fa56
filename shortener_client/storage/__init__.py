"""
Blob store module for persisted client state.
Implements Strategy Pattern for flexible persistence backends.
"""

from .strategies import (
    BlobStoreStrategy,
    InMemoryBlobStore,
    FileBlobStore,
    RedisBlobStore,
    SQLBlobStore,
    NullBlobStore,
)
from .factory import BlobStoreFactory, BlobStoreBackend

__all__ = [
    "BlobStoreStrategy",
    "InMemoryBlobStore",
    "FileBlobStore",
    "RedisBlobStore",
    "SQLBlobStore",
    "NullBlobStore",
    "BlobStoreFactory",
    "BlobStoreBackend",
]
