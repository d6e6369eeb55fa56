"""
Database models for the shortener client.

Only the SQL blob store uses a table: history is kept as one JSON blob
per key, never as one row per entry.
"""

from .blob import StoredBlob

__all__ = ["StoredBlob"]
