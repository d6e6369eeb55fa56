"""
Normalization of the shortening service's JSON response.

The service is allowed to spell its fields several ways. The accepted keys
live here, in precedence order, so callers never guess at field names.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from shortener_client.exceptions import UnexpectedResponseError
from shortener_client.schemas.link import ShortenResult


logger = logging.getLogger(__name__)

SHORT_URL_KEYS: Tuple[str, ...] = ("shortUrl", "short_url", "short")
EXPIRES_AT_KEYS: Tuple[str, ...] = ("expiresAt", "expires_at")

# Epoch milliseconds pass 10^11 in 1973; anything smaller is probably seconds
_MILLISECONDS_FLOOR = 10 ** 11


def extract_short_url(data: dict) -> Optional[str]:
    """First non-empty string under SHORT_URL_KEYS, or None"""
    for key in SHORT_URL_KEYS:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def extract_expires_at(data: dict) -> Optional[int]:
    """
    First usable expiry under EXPIRES_AT_KEYS, as epoch milliseconds.
    
    Null, empty and zero values are treated as absent. Numbers and numeric
    strings are accepted verbatim with no unit conversion.
    
    Raises:
        UnexpectedResponseError: If the first present value is not numeric
    """
    for key in EXPIRES_AT_KEYS:
        value = data.get(key)
        if value is None or value == "" or value == 0:
            continue
        
        try:
            expires_at = int(float(value))
        except (TypeError, ValueError, OverflowError):
            raise UnexpectedResponseError()
        
        if expires_at < _MILLISECONDS_FLOOR:
            logger.warning(
                "Server expiry %s under key %r looks like seconds; using it unchanged",
                value, key,
            )
        return expires_at
    return None


def normalize_response(
    data: Any,
    validity_minutes: int,
    now_ms: Callable[[], int],
) -> ShortenResult:
    """
    Turn a decoded 2xx body into a ShortenResult.
    
    The server's expiry wins; without one it is derived locally as
    now + validity_minutes.
    
    Raises:
        UnexpectedResponseError: If the body is not an object or carries
            no short URL
    """
    if not isinstance(data, dict):
        raise UnexpectedResponseError()
    
    short_url = extract_short_url(data)
    if short_url is None:
        raise UnexpectedResponseError()
    
    expires_at = extract_expires_at(data)
    if expires_at is None:
        expires_at = now_ms() + validity_minutes * 60 * 1000
    
    return ShortenResult(short_url=short_url, expires_at=expires_at)
