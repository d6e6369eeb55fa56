from .link import (
    ShortenRequest,
    ShortenResult,
    HistoryEntry,
    SubmissionState,
    SubmissionView,
    SubmitForm,
    CopyRequest,
    CopyResponse,
    OpenRequest,
)

__all__ = [
    "ShortenRequest",
    "ShortenResult",
    "HistoryEntry",
    "SubmissionState",
    "SubmissionView",
    "SubmitForm",
    "CopyRequest",
    "CopyResponse",
    "OpenRequest",
]
