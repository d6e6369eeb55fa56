"""
Error taxonomy for the shortener client.

Every ShortenError carries a user-facing message. The orchestrator catches
them at its submit() boundary and turns them into displayable state, so
none of them escape to the presentation layer.
"""

from typing import Optional


GENERIC_FAILURE_MESSAGE = "Something went wrong"


class ShortenError(Exception):
    """Base class for every failure of a shortening attempt"""
    
    default_message = GENERIC_FAILURE_MESSAGE
    
    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingInputError(ShortenError):
    """The long URL field was empty"""
    default_message = "Please enter a URL to shorten."


class InvalidUrlError(ShortenError):
    """The long URL is not an absolute http(s) URL"""
    default_message = "Please enter a valid http(s) URL."


class InvalidValidityError(ShortenError):
    """The validity field is not a positive whole number of minutes"""
    default_message = "Validity must be a positive integer (minutes)."


class HttpStatusError(ShortenError):
    """The service answered with a non-2xx status"""
    default_message = "Failed to shorten URL"
    
    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UnexpectedResponseError(ShortenError):
    """The service answered 2xx but the body has no usable short URL"""
    default_message = "Unexpected response from server."


class TransportError(ShortenError):
    """Network failure, timeout or undecodable body"""


class StorageError(Exception):
    """Raised by blob stores when the persistence medium fails"""


class ClipboardError(Exception):
    """Raised by clipboard backends when text cannot be written"""
