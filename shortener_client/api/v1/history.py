from typing import List

from fastapi import APIRouter, Depends, status

from shortener_client.dependencies import get_history
from shortener_client.schemas.link import HistoryEntry
from shortener_client.services.history_store import HistoryStore

router = APIRouter(prefix="/history", tags=["history"])


@router.get("/", response_model=List[HistoryEntry])
async def list_history(history: HistoryStore = Depends(get_history)):
    """Past shortenings, newest first"""
    return history.entries


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def clear_history(history: HistoryStore = Depends(get_history)):
    """Drop every entry and persist the empty history"""
    history.clear()
