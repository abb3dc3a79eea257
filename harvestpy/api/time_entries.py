"""Time entries endpoints of the Harvest API."""
import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from ..models.time_entry import TimeEntriesPage, TimeEntry
from .context import Context
from .options import ListOptions, QueryParams
from .response import Response
from .urls import add_options

if TYPE_CHECKING:
    from .client import Client

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeEntriesListOptions(ListOptions):
    """Optional parameters of ``TimeEntriesService.list``.

    from_date and to_date are passed through as given (e.g. "2024-01-31").
    """

    from_date: str = ""
    to_date: str = ""

    def query_params(self) -> QueryParams:
        params = []
        if self.from_date:
            params.append(("from", self.from_date))
        if self.to_date:
            params.append(("to", self.to_date))
        return params + super().query_params()


class TimeEntriesService:
    """Operations on /v2/time_entries."""

    def __init__(self, client: "Client"):
        self.client = client

    def list(self, ctx: Context,
             opts: Optional[TimeEntriesListOptions] = None) -> Tuple[List[TimeEntry], Response]:
        """List one page of time entries.

        Args:
            ctx: Context bounding the call
            opts: Date range and page selection (optional)

        Returns:
            Tuple of (time entries of the page, response with page numbers)
        """
        u = add_options("time_entries", opts)
        req = self.client.new_request("GET", u)

        page = TimeEntriesPage()
        resp = self.client.do(ctx, req, page)
        resp.populate_page_values(page.pagination)
        logger.debug("Fetched %d time entries (page %d of %d)",
                     len(page.time_entries), page.pagination.page, page.pagination.total_pages)
        return page.time_entries, resp

    def iter_all(self, ctx: Context,
                 opts: Optional[TimeEntriesListOptions] = None) -> Iterator[TimeEntry]:
        """Yield every time entry from the requested page to the last one.

        Args:
            ctx: Context bounding every page request
            opts: Date range and starting page (optional)

        Yields:
            Time entries in server order, page after page
        """
        opts = opts or TimeEntriesListOptions()
        while True:
            entries, resp = self.list(ctx, opts)
            yield from entries
            current = resp.pagination.page if resp.pagination else 0
            if not entries or current <= 0 or current >= resp.last_page:
                break
            opts = replace(opts, page=resp.next_page)
