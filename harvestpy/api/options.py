"""Query options accepted by list endpoints."""
from dataclasses import dataclass
from typing import List, Protocol, Tuple

QueryParams = List[Tuple[str, str]]


class QueryOptions(Protocol):
    """Anything that can describe itself as query parameters."""

    def query_params(self) -> QueryParams:
        ...


@dataclass(frozen=True)
class ListOptions:
    """Page selection for endpoints that support offset pagination.

    A zero value leaves the choice to the server and is not sent.
    """

    page: int = 0
    per_page: int = 0

    def query_params(self) -> QueryParams:
        """Return the non-zero fields as (name, value) pairs."""
        params = []
        if self.page:
            params.append(("page", str(self.page)))
        if self.per_page:
            params.append(("per_page", str(self.per_page)))
        return params
