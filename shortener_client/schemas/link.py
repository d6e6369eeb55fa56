from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for models that travel as camelCase JSON (persisted blob, API)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortenRequest(CamelModel):
    """One validated submission. Built fresh per submit, never persisted."""

    long_url: str = Field(..., description="Absolute http(s) URL to shorten")
    alias: Optional[str] = Field(None, description="Requested custom alias")
    validity_minutes: int = Field(30, gt=0, description="Validity window in minutes")

    def to_payload(self) -> Dict[str, Any]:
        """Outbound JSON body. The alias key is omitted unless non-empty."""
        payload: Dict[str, Any] = {"url": self.long_url, "validity": self.validity_minutes}
        if self.alias:
            payload["alias"] = self.alias
        return payload


class ShortenResult(CamelModel):
    short_url: str
    expires_at: int = Field(..., description="Epoch milliseconds")


class HistoryEntry(CamelModel):
    """A past successful shortening, stored newest first"""

    long_url: str
    short_url: str
    created_at: int = Field(..., description="Epoch milliseconds at submission")
    expires_at: int = Field(..., description="Epoch milliseconds")
    validity_minutes: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SubmissionState(str, Enum):
    """Lifecycle of the single in-flight submission"""
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionView(CamelModel):
    """Snapshot of the orchestrator for rendering"""

    state: SubmissionState
    is_busy: bool = False
    error_message: Optional[str] = None
    short_url: Optional[str] = None
    expires_at: Optional[int] = None
    alias: str = ""


class SubmitForm(CamelModel):
    """Raw form fields, validated by the orchestrator rather than here"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)

    long_url: str = ""
    alias: str = ""
    validity: str = ""


class CopyRequest(CamelModel):
    text: str


class CopyResponse(CamelModel):
    copied: bool


class OpenRequest(CamelModel):
    url: str
