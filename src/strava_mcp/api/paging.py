"""
Paging — one page on request, every page otherwise.

Strava signals the end of a listing only by returning a page shorter than
per_page, so "fetch everything" keeps asking for the next page until that
happens.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar

from strava_mcp.sdk.types import MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Paging:
    """A paging instruction: 1-based page number and page size."""
    page: int = 1
    page_size: int = 30

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}")


def handle_paging(
    paging_instruction: Optional[Paging],
    fetch: Callable[[Paging], Optional[List[T]]],
) -> Optional[List[T]]:
    """
    Run fetch for the requested page, or for every page.

    Args:
        paging_instruction: The page to get. None means all of them.
        fetch: Gets one page; returns None when the parent resource is gone.

    Returns:
        The single page unmodified, or all pages concatenated in order.
    """
    if paging_instruction is not None:
        return fetch(paging_instruction)
    return handle_list_all(fetch)


def handle_list_all(fetch: Callable[[Paging], Optional[List[T]]]) -> Optional[List[T]]:
    """
    Request page 1, 2, ... at the maximum page size until a short page.

    Returns None if the first page is None.
    """
    results: List[T] = []
    page = 1
    while True:
        items = fetch(Paging(page=page, page_size=MAX_PAGE_SIZE))
        if items is None:
            return None if page == 1 else results
        results.extend(items)
        if len(items) < MAX_PAGE_SIZE:
            break
        page += 1

    logger.debug(f"Fetched {len(results)} items in {page} page(s)")
    return results
