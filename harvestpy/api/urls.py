"""URL helpers: query-string options and sanitizing for error messages."""
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .options import QueryOptions

# Query parameters whose values never appear in error messages.
REDACTED_PARAMS = ("access_token",)


def add_options(path: str, opts: Optional[QueryOptions]) -> str:
    """Append the query parameters of an options object to a path.

    Args:
        path: Relative API path (e.g. "time_entries")
        opts: Options object exposing ``query_params()``, or None

    Returns:
        The path with an encoded query string, or the path unchanged when
        there is nothing to send
    """
    if opts is None:
        return path
    params = opts.query_params()
    if not params:
        return path
    parts = urlsplit(path)
    query = urlencode(parse_qsl(parts.query) + params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def sanitize_url(url: Optional[str]) -> str:
    """Strip credentials from a URL before it is shown to anyone.

    Args:
        url: Absolute or relative URL

    Returns:
        The URL without user-info and with secret query values masked
    """
    if not url:
        return ""
    parts = urlsplit(url)
    netloc = parts.netloc.rsplit("@", 1)[-1]
    query = parts.query
    if query:
        pairs = [(k, "REDACTED" if k in REDACTED_PARAMS else v)
                 for k, v in parse_qsl(query, keep_blank_values=True)]
        query = urlencode(pairs)
    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))
