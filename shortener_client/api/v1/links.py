from fastapi import APIRouter, Depends, HTTPException, status

from shortener_client.dependencies import get_clipboard, get_orchestrator
from shortener_client.schemas.link import (
    CopyRequest,
    CopyResponse,
    OpenRequest,
    SubmissionView,
    SubmitForm,
)
from shortener_client.services.shorten_orchestrator import ShortenOrchestrator
from shortener_client.services.side_actions import (
    ClipboardStrategy,
    copy_to_clipboard,
    open_in_new_tab,
)

router = APIRouter(prefix="/links", tags=["links"])


@router.post("/", response_model=SubmissionView)
async def submit_link(
    form: SubmitForm,
    orchestrator: ShortenOrchestrator = Depends(get_orchestrator)
):
    """Submit the form; errors come back as state, not as HTTP failures"""
    if orchestrator.is_busy:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A submission is already in progress"
        )
    await orchestrator.submit(form.long_url, form.alias, form.validity)
    return orchestrator.view()


@router.get("/current", response_model=SubmissionView)
async def current_submission(
    orchestrator: ShortenOrchestrator = Depends(get_orchestrator)
):
    """State of the latest submission"""
    return orchestrator.view()


@router.post("/copy", response_model=CopyResponse)
async def copy_link(
    body: CopyRequest,
    clipboard: ClipboardStrategy = Depends(get_clipboard)
):
    """Copy text to the clipboard (best effort)"""
    copied = await copy_to_clipboard(body.text, clipboard)
    return CopyResponse(copied=copied)


@router.post("/open", status_code=status.HTTP_202_ACCEPTED)
async def open_link(body: OpenRequest):
    """Open a URL in a new browser tab without waiting for the browser"""
    open_in_new_tab(body.url)
    return {"url": body.url}
