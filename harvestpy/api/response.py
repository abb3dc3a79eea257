"""API responses, pagination metadata and decoding destinations."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import requests


@runtime_checkable
class RawSink(Protocol):
    """A destination that takes the response body as raw bytes."""

    def write(self, data: bytes) -> Any:
        ...


@runtime_checkable
class JSONDestination(Protocol):
    """A destination that is filled from a decoded JSON payload."""

    def load_json(self, payload: Any) -> None:
        ...


def _int_field(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} is not an integer: {value!r}")
    return value


@dataclass(frozen=True)
class Pagination:
    """Pagination block embedded in list responses."""

    per_page: int = 0
    total_pages: int = 0
    total_entries: int = 0
    next_page: int = 0
    previous_page: int = 0
    page: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pagination":
        """Create from the top level of a list response.

        The server sends null for next_page/previous_page at the edges.
        Any other non-integer value raises TypeError.
        """
        return cls(
            per_page=_int_field(data, "per_page"),
            total_pages=_int_field(data, "total_pages"),
            total_entries=_int_field(data, "total_entries"),
            next_page=_int_field(data, "next_page"),
            previous_page=_int_field(data, "previous_page"),
            page=_int_field(data, "page"),
        )


class Response:
    """An API response.

    Wraps the ``requests.Response`` (attribute access falls through to it) and
    adds page numbers computed from the pagination block of list endpoints.
    """

    def __init__(self, http_response: requests.Response):
        self.http_response = http_response
        self.pagination: Optional[Pagination] = None
        self.first_page = 0
        self.last_page = 0
        self.next_page = 0
        self.previous_page = 0

    def __getattr__(self, name: str) -> Any:
        try:
            http_response = self.__dict__["http_response"]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(http_response, name)

    def populate_page_values(self, pagination: Pagination) -> None:
        """Compute first/last/next/previous pages, clamped to [1, total_pages]."""
        self.pagination = pagination
        self.first_page = 1
        self.last_page = pagination.total_pages

        self.next_page = pagination.page + 1
        if self.next_page > self.last_page:
            self.next_page = self.last_page

        self.previous_page = pagination.page - 1
        if self.previous_page < self.first_page:
            self.previous_page = self.first_page

    def __repr__(self) -> str:
        return (f"<Response [{self.http_response.status_code}] page first={self.first_page} "
                f"prev={self.previous_page} next={self.next_page} last={self.last_page}>")
