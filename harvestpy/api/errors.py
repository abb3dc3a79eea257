"""Exception types raised by the Harvest API client."""
from typing import Optional, Union

import requests

from .response import Response
from .urls import sanitize_url


class HarvestError(Exception):
    """Base class for every error raised by harvestpy."""


class ConfigurationError(HarvestError, ValueError):
    """The client is configured with a base URL that cannot be used."""


class SerializationError(HarvestError, TypeError):
    """A request body could not be encoded as JSON."""


class MissingContextError(HarvestError, TypeError):
    """A request was dispatched without a context."""


class ContextError(HarvestError):
    """The context of a call is done."""


class Canceled(ContextError):
    """The context was cancelled by the caller."""

    def __init__(self, message: str = "context canceled"):
        super().__init__(message)


class DeadlineExceeded(ContextError):
    """The context deadline passed."""

    def __init__(self, message: str = "context deadline exceeded"):
        super().__init__(message)


class TransportError(HarvestError):
    """The request never produced an HTTP response."""

    def __init__(self, method: str, url: str, reason: str):
        """Initialize a TransportError.

        Args:
            method: HTTP method of the failed request
            url: Sanitized request URL
            reason: Description of the underlying failure
        """
        super().__init__(f"{method} {url}: {reason}")
        self.method = method
        self.url = url
        self.reason = reason


class DecodeError(HarvestError, ValueError):
    """A successful response carried a body that could not be decoded."""


class ErrorResponse(HarvestError):
    """An API error reported through a non-success HTTP status.

    The body is expected to be a JSON object with ``error`` and
    ``error_description`` fields; both stay empty when it is not.
    """

    def __init__(self, response: Optional[Union[Response, requests.Response]], error_code: str = "",
                 error_description: str = ""):
        super().__init__(error_code, error_description)
        self.response = response
        self.error_code = error_code
        self.error_description = error_description

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    def __str__(self) -> str:
        if self.response is None:
            return f"{self.error_code} {self.error_description}"
        request = self.response.request
        method = request.method if request is not None else ""
        url = sanitize_url(request.url if request is not None else self.response.url)
        return f"{method} {url}: {self.status_code} {self.error_code} {self.error_description}"


class AuthError(ErrorResponse):
    """The API rejected the credentials (HTTP 401)."""

    def __str__(self) -> str:
        return f"{self.error_code} {self.error_description}"
