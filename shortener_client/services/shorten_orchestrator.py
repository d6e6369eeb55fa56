"""
Orchestration of one shortening submission.

Flow: validate input -> POST to the service -> normalize the response ->
derive expiry -> record history -> reset the alias field.

Every failure is a ShortenError caught at the submit() boundary and kept
as state for the presentation layer. Only one submission is modeled at a
time; guarding against re-submission while busy is the caller's job.
"""

import logging
import time
from typing import Callable, Optional

import httpx

from shortener_client.exceptions import (
    GENERIC_FAILURE_MESSAGE,
    HttpStatusError,
    InvalidUrlError,
    InvalidValidityError,
    MissingInputError,
    ShortenError,
    TransportError,
)
from shortener_client.schemas.link import (
    HistoryEntry,
    ShortenRequest,
    ShortenResult,
    SubmissionState,
    SubmissionView,
)
from shortener_client.services.history_store import HistoryStore
from shortener_client.services.response_normalizer import normalize_response
from shortener_client.services.validators import (
    DEFAULT_VALIDITY_MINUTES,
    is_valid_http_url,
    resolve_validity,
)


logger = logging.getLogger(__name__)

SHORTEN_PATH = "/shorten"
DEFAULT_TIMEOUT = 10.0


def epoch_ms() -> int:
    """Current time in epoch milliseconds"""
    return int(time.time() * 1000)


class ShortenOrchestrator:
    """
    Coordinates validation, the network call and the history update.
    
    Dependencies are injected:
    - history: HistoryStore that receives each successful result
    - http_client: optional shared httpx.AsyncClient; without one a client
      is opened per submission
    - now_ms: clock returning epoch milliseconds
    """
    
    def __init__(
        self,
        history: HistoryStore,
        api_base_url: str = "",
        origin: str = "",
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        default_validity: int = DEFAULT_VALIDITY_MINUTES,
        now_ms: Callable[[], int] = epoch_ms,
    ):
        """
        Args:
            history: Store receiving successful results
            api_base_url: Service base URL; empty means same origin as the UI
            origin: Origin used to resolve a relative endpoint when no
                http_client is injected
            http_client: Shared client (its base_url resolves relative endpoints)
            timeout: Request timeout in seconds for per-submission clients
            default_validity: Minutes used when the validity field is blank
            now_ms: Clock, injectable for tests
        """
        self.history = history
        self.api_base_url = api_base_url
        self.origin = origin
        self.http_client = http_client
        self.timeout = timeout
        self.default_validity = default_validity
        self.now_ms = now_ms
        
        self.state = SubmissionState.IDLE
        self.error: Optional[ShortenError] = None
        self.result: Optional[ShortenResult] = None
        self.alias = ""
    
    @property
    def endpoint(self) -> str:
        return f"{self.api_base_url.rstrip('/')}{SHORTEN_PATH}"
    
    @property
    def is_busy(self) -> bool:
        """True while the request is in flight; callers disable re-submission"""
        return self.state == SubmissionState.SUBMITTING
    
    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None
    
    def reset(self) -> None:
        """Back to idle, dropping the previous error and result"""
        self.state = SubmissionState.IDLE
        self.error = None
        self.result = None
    
    def view(self) -> SubmissionView:
        return SubmissionView(
            state=self.state,
            is_busy=self.is_busy,
            error_message=self.error_message,
            short_url=self.result.short_url if self.result else None,
            expires_at=self.result.expires_at if self.result else None,
            alias=self.alias,
        )
    
    def validate(self, long_url: str, alias: str = "", validity_raw: str = "") -> ShortenRequest:
        """
        Build a ShortenRequest from raw form fields.
        
        Raises:
            MissingInputError: Long URL is blank
            InvalidUrlError: Long URL is not an absolute http(s) URL
            InvalidValidityError: Validity is not a positive whole number
        """
        trimmed_url = (long_url or "").strip()
        if not trimmed_url:
            raise MissingInputError()
        if not is_valid_http_url(trimmed_url):
            raise InvalidUrlError()
        
        minutes = resolve_validity(validity_raw, default=self.default_validity)
        if minutes is None:
            raise InvalidValidityError()
        
        trimmed_alias = (alias or "").strip()
        return ShortenRequest(
            long_url=trimmed_url,
            alias=trimmed_alias or None,
            validity_minutes=minutes,
        )
    
    async def submit(
        self,
        long_url: str,
        alias: str = "",
        validity_raw: str = "",
    ) -> Optional[ShortenResult]:
        """
        Run one submission end to end.
        
        Returns:
            The ShortenResult on success, None otherwise. On failure the
            error and its user-facing message are available through
            `error` / `error_message`.
        """
        self.reset()
        self.alias = alias or ""
        self.state = SubmissionState.VALIDATING
        
        try:
            request = self.validate(long_url, alias, validity_raw)
        except ShortenError as e:
            logger.info("Submission rejected: %s", e.message)
            self.error = e
            self.state = SubmissionState.INVALID
            return None
        
        self.state = SubmissionState.SUBMITTING
        created_at = self.now_ms()
        try:
            result = await self._shorten(request)
        except ShortenError as e:
            logger.warning("Shortening %s failed: %s", request.long_url, e.message)
            self.error = e
            self.state = SubmissionState.FAILED
            return None
        
        self.history.record(HistoryEntry(
            long_url=request.long_url,
            short_url=result.short_url,
            created_at=created_at,
            expires_at=result.expires_at,
            validity_minutes=request.validity_minutes,
        ))
        self.alias = ""
        self.result = result
        self.state = SubmissionState.SUCCEEDED
        logger.info("Shortened %s to %s", request.long_url, result.short_url)
        return result
    
    async def _shorten(self, request: ShortenRequest) -> ShortenResult:
        try:
            if self.http_client is not None:
                response = await self._post(self.http_client, request)
            else:
                async with httpx.AsyncClient(base_url=self.origin, timeout=self.timeout) as client:
                    response = await self._post(client, request)
            
            if not response.is_success:
                raise HttpStatusError(response.text or None, status_code=response.status_code)
            
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(str(e) or GENERIC_FAILURE_MESSAGE) from e
        except ValueError as e:
            # 2xx with a body that is not JSON
            raise TransportError(str(e) or GENERIC_FAILURE_MESSAGE) from e
        
        return normalize_response(data, request.validity_minutes, self.now_ms)
    
    async def _post(self, client: httpx.AsyncClient, request: ShortenRequest) -> httpx.Response:
        # httpx sets Content-Type: application/json for json=; 307/308 keep the POST body
        return await client.post(self.endpoint, json=request.to_payload(), follow_redirects=True)
