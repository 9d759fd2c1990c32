from __future__ import annotations
import logging
from typing import List, Optional

from .http_client import HttpClient
from .models import NamedAPIResource, NamedAPIResourceList

log = logging.getLogger(__name__)


def page_params(limit: Optional[int] = None, offset: Optional[int] = None) -> Optional[dict[str, int]]:
    """Query params for the first page; only given values are sent so the API applies its own defaults."""
    params: dict[str, int] = {}
    if limit is not None:
        params["limit"] = limit
    if offset is not None:
        params["offset"] = offset
    return params or None


class PageCollector:
    """
    Accumulates listing pages in server order and decides which page comes next.

    Only the first page is taken unless `autopaginate` is set, in which case the
    `next` link is followed until the API stops sending one. Nothing is reordered
    or deduplicated. There is no cycle detection: a looping `next` chain never ends.
    """

    def __init__(self, autopaginate: bool):
        self.autopaginate = autopaginate
        self.results: List[NamedAPIResource] = []
        self.pages = 0

    def add(self, page: NamedAPIResourceList) -> Optional[str]:
        """Record a page; return the URL to fetch next, or None when done."""
        self.results.extend(page.results)
        self.pages += 1
        return page.next if self.autopaginate else None

    def collected(self, source: str) -> List[NamedAPIResource]:
        log.debug("Collected %d resource(s) across %d page(s) from %s", len(self.results), self.pages, source)
        return self.results


async def fetch_page(http: HttpClient, url: str, params: Optional[dict[str, int]] = None) -> NamedAPIResourceList:
    return await http.get_model(url, NamedAPIResourceList, params=params)


async def fetch_all(
    http: HttpClient,
    endpoint: str,
    autopaginate: bool,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> List[NamedAPIResource]:
    """
    Walk a paginated listing and return its references in order.
    Pages are fetched one after another; any failure aborts the whole walk.
    """
    collector = PageCollector(autopaginate)
    next_url = collector.add(await fetch_page(http, endpoint, page_params(limit, offset)))
    while next_url is not None:
        next_url = collector.add(await fetch_page(http, next_url))
    return collector.collected(endpoint)
