"""
FastAPI dependencies for dependency injection.

This module provides the session-lifetime singletons: the blob store, the
history rehydrated from it, the clipboard, and the orchestrator that
owns the history for the rest of the session.
"""

from functools import lru_cache

from fastapi import Depends

from shortener_client.config import settings
from shortener_client.services.history_store import HistoryStore
from shortener_client.services.shorten_orchestrator import ShortenOrchestrator
from shortener_client.services.side_actions import (
    ClipboardStrategy,
    InMemoryClipboard,
    SystemClipboard,
)
from shortener_client.storage.factory import BlobStoreBackend, BlobStoreFactory
from shortener_client.storage.strategies import BlobStoreStrategy


@lru_cache()
def get_blob_store() -> BlobStoreStrategy:
    """
    Get blob store instance (singleton).
    
    Factory gets config from settings internally.
    """
    backend = BlobStoreBackend(settings.storage_backend)
    return BlobStoreFactory.create(backend)


@lru_cache()
def get_history_store() -> HistoryStore:
    """History store, loaded once from the blob store at startup"""
    history = HistoryStore(
        blob_store=get_blob_store(),
        key=settings.history_storage_key,
        capacity=settings.history_capacity,
    )
    history.load()
    return history


@lru_cache()
def get_clipboard() -> ClipboardStrategy:
    if settings.clipboard_backend == "memory":
        return InMemoryClipboard()
    return SystemClipboard()


@lru_cache()
def get_orchestrator() -> ShortenOrchestrator:
    """
    Orchestrator for the session.
    
    One instance so that submission state survives between requests.
    """
    return ShortenOrchestrator(
        history=get_history_store(),
        api_base_url=settings.api_base_url,
        origin=settings.ui_origin,
        timeout=settings.request_timeout,
        default_validity=settings.default_validity_minutes,
    )


def get_history(orchestrator: ShortenOrchestrator = Depends(get_orchestrator)) -> HistoryStore:
    """The history owned by the orchestrator (overriding one overrides both)"""
    return orchestrator.history
