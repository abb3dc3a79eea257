"""
Client: the authenticated request/response pipeline for the Harvest v2 API.
"""
import json
import logging
from typing import Any, Optional, Union
from urllib.parse import urljoin, urlsplit

import requests

from .context import Context
from .errors import (
    AuthError,
    ConfigurationError,
    DeadlineExceeded,
    DecodeError,
    ErrorResponse,
    MissingContextError,
    SerializationError,
    TransportError,
)
from .response import JSONDestination, RawSink, Response
from .time_entries import TimeEntriesService
from .urls import sanitize_url

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.harvestapp.com/"
DEFAULT_API_VERSION = "v2/"
DEFAULT_USER_AGENT = "harvestpy"
DEFAULT_TIMEOUT = 30

Destination = Union[RawSink, JSONDestination]


class Client:
    """A client for the Harvest v2 API.

    Holds configuration only, so one instance can serve concurrent calls.
    """

    def __init__(self, access_token: str, account_id: str,
                 base_url: str = DEFAULT_BASE_URL,
                 api_version: str = DEFAULT_API_VERSION,
                 user_agent: str = DEFAULT_USER_AGENT,
                 timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        """Initialize the Client.

        Args:
            access_token: Personal access token or OAuth2 token
            account_id: Harvest account ID
            base_url: API root, must end with a slash
            api_version: Versioned path joined to base_url, must end with a slash
            user_agent: User-Agent header value; empty to leave it unset
            timeout: Request timeout in seconds when the context has no deadline
            session: Transport to send requests with (optional)
        """
        self.access_token = access_token
        self.account_id = account_id
        self.base_url = base_url
        self.api_version = api_version
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

        self.time_entries = TimeEntriesService(self)

    def new_request(self, method: str, url_str: str, body: Any = None) -> requests.PreparedRequest:
        """Build an authenticated API request.

        Args:
            method: HTTP method
            url_str: Path relative to the versioned base URL, with any query string
            body: Value to send as JSON (optional)

        Returns:
            A request ready for ``do``

        Raises:
            ConfigurationError: If base_url has no trailing slash or the URL is unusable
            SerializationError: If body cannot be encoded as JSON
        """
        if not urlsplit(self.base_url).path.endswith("/"):
            raise ConfigurationError(
                f"base_url must have a trailing slash, but {self.base_url!r} does not")
        url = urljoin(self.base_url, self.api_version + url_str)

        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Harvest-Account-Id": self.account_id,
            "Accept": "application/json",
        }
        data = None
        if body is not None:
            data = encode_json(body)
            headers["Content-Type"] = "application/json"
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        try:
            return requests.Request(method, url, headers=headers, data=data).prepare()
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise ConfigurationError(f"cannot build request for {sanitize_url(url)}: {e}") from e

    def do(self, ctx: Context, request: requests.PreparedRequest,
           dest: Optional[Destination] = None) -> Response:
        """Send a request and decode the response into dest.

        If dest has a ``write`` method the raw body is written to it; otherwise
        the JSON body is handed to ``dest.load_json``. An empty body leaves dest
        untouched.

        Args:
            ctx: Context bounding the call
            request: Request built by ``new_request``
            dest: Where to put the body (optional)

        Returns:
            The wrapped response

        Raises:
            MissingContextError: If ctx is None
            ContextError: If ctx is cancelled or expired, before or during the call
            TransportError: If no response was received
            ErrorResponse: If the status code reports an error (AuthError for 401)
            DecodeError: If the body of a successful response is malformed
        """
        if ctx is None:
            raise MissingContextError("context must be non-nil")
        err = ctx.err()
        if err is not None:
            raise err

        timeout = ctx.remaining()
        if timeout is None:
            timeout = self.timeout
        elif timeout <= 0:
            # The deadline passed after the check above.
            raise ctx.err() or DeadlineExceeded()

        url = sanitize_url(request.url)
        logger.debug("%s %s", request.method, url)
        try:
            http_response = self.session.send(request, timeout=timeout)
        except requests.RequestException as e:
            # A done context explains the failure better than the transport does.
            err = ctx.err()
            if err is not None:
                raise err from e
            raise TransportError(request.method, url, str(e)) from e

        with http_response:
            response = Response(http_response)
            logger.debug("%s %s -> %d", request.method, url, http_response.status_code)
            check_response(response)
            if dest is not None:
                decode_body(response, dest)
        return response


def encode_json(body: Any) -> bytes:
    """Encode a request body as UTF-8 JSON.

    Objects with a ``to_dict`` method are converted first.
    """
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    try:
        return json.dumps(body, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode request body: {e}") from e


def check_response(response: Response) -> None:
    """Raise if the response reports an API error.

    Statuses 200-299 are success, except 202 Accepted which the API uses for
    requests it did not complete. The body of an error response is read in
    full and stays available through ``response.content``.

    Raises:
        AuthError: On 401
        ErrorResponse: On any other failure status
    """
    status = response.status_code
    if 200 <= status <= 299 and status != 202:
        return

    error_code = error_description = ""
    data = response.content
    if data:
        try:
            payload = json.loads(data)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            if isinstance(payload.get("error"), str):
                error_code = payload["error"]
            if isinstance(payload.get("error_description"), str):
                error_description = payload["error_description"]

    if status == 401:
        raise AuthError(response, error_code, error_description)
    raise ErrorResponse(response, error_code, error_description)


def decode_body(response: Response, dest: Destination) -> None:
    """Copy or decode the body of a successful response into dest.

    Raises:
        DecodeError: If the body is not valid JSON or does not fit dest
    """
    if isinstance(dest, RawSink):
        dest.write(response.content)
        return
    if not isinstance(dest, JSONDestination):
        raise TypeError(f"cannot decode into {type(dest).__name__}: no write() or load_json()")

    body = response.content
    if not body or not body.strip():
        return
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"invalid JSON in response body: {e}") from e
    try:
        dest.load_json(payload)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"unexpected response payload: {e}") from e
