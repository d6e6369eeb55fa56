"""
Input validation that runs before any network call.

Both checks are pure and never raise: malformed input is a normal
negative result.
"""

import re
from typing import Optional

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError


DEFAULT_VALIDITY_MINUTES = 30

_http_url_adapter = TypeAdapter(AnyHttpUrl)
# Base-10 digits only: "15.0" and "1e3" are rejected even though they are integral
_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


def is_valid_http_url(raw: str) -> bool:
    """
    Return True only for an absolute URL whose scheme is http or https.
    
    Parsing is delegated to pydantic's AnyHttpUrl, which already rejects
    other schemes and URLs without a host. No length limit is applied.
    """
    if not raw:
        return False
    try:
        url = _http_url_adapter.validate_python(raw)
    except ValidationError:
        return False
    return url.scheme in ("http", "https")


def resolve_validity(
    raw: Optional[str],
    default: int = DEFAULT_VALIDITY_MINUTES,
) -> Optional[int]:
    """
    Resolve the validity field into whole minutes.
    
    Args:
        raw: Field contents, possibly empty
        default: Minutes used when the field is blank
        
    Returns:
        Positive number of minutes, or None when the value is not a
        whole number greater than zero (e.g. "0", "-5", "2.5", "abc")
    """
    text = (raw or "").strip()
    if not text:
        return default
    
    if not _WHOLE_NUMBER.fullmatch(text):
        return None
    
    minutes = int(text)
    if minutes <= 0:
        return None
    return minutes
