# shelves/smart/resolvers.py
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .context import ShelfContext
from .items import ShelfItem, project_all
from .pagination import PageWindow, ShelfPage

logger = logging.getLogger(__name__)

# rows fetched per source for the recent shelf, as a multiple of the page size
RECENT_WINDOW_MULTIPLIER = 2

NEWEST_FIRST = (("created_at", "desc"),)
RECENTLY_UPDATED_FIRST = (("updated_at", "desc"),)
HIGHEST_RATED_FIRST = (("rating", "desc"), ("created_at", "desc"))

class ShelfResolver(ABC):
    """Strategy computing one page of one shelf type."""

    # whether count() gives the exact number of items on the shelf
    exact_count = False

    @abstractmethod
    def resolve(self, context: ShelfContext, user_id: int, window: PageWindow) -> ShelfPage:
        ...

    def count(self, context: ShelfContext, user_id: int) -> Optional[int]:
        return None

@dataclass(frozen=True)
class DirectShelfResolver(ShelfResolver):
    """A shelf backed by a single collection.

    Covers both the status shelves (filter + sort) and the favorites and
    top-rated shelves (sort only). Paging and counting happen in the store.
    """
    collection: str
    project: Callable[[Any], ShelfItem]
    sort: Tuple[Tuple[str, str], ...]
    filters: Optional[Tuple[Tuple[str, Any], ...]] = None

    exact_count = True

    def _filters(self) -> Optional[Dict[str, Any]]:
        return dict(self.filters) if self.filters else None

    def _fetch_page(self, context: ShelfContext, user_id: int, window: PageWindow) -> List[ShelfItem]:
        with context.store.read() as repos:
            rows = getattr(repos, self.collection).find_by_owner(
                user_id,
                filters=self._filters(),
                sort=self.sort,
                skip=window.skip,
                limit=window.limit
            )
            return project_all(rows, self.project)

    def count(self, context: ShelfContext, user_id: int) -> int:
        with context.store.read() as repos:
            return getattr(repos, self.collection).count_by_owner(user_id, filters=self._filters())

    def resolve(self, context: ShelfContext, user_id: int, window: PageWindow) -> ShelfPage:
        results = context.gather({
            "items": lambda: self._fetch_page(context, user_id, window),
            "total": lambda: self.count(context, user_id),
        })
        return ShelfPage(page=window.page, limit=window.limit, total=results["total"], items=results["items"])

def status_shelf(status: str) -> DirectShelfResolver:
    return DirectShelfResolver(
        collection="readings",
        project=ShelfItem.from_reading,
        sort=RECENTLY_UPDATED_FIRST,
        filters=(("status", status),)
    )

def favorites_shelf() -> DirectShelfResolver:
    return DirectShelfResolver(collection="favorites", project=ShelfItem.from_favorite, sort=NEWEST_FIRST)

def top_rated_shelf() -> DirectShelfResolver:
    return DirectShelfResolver(collection="reviews", project=ShelfItem.from_review, sort=HIGHEST_RATED_FIRST)

def merge_by_book(reading_items: List[ShelfItem], favorite_items: List[ShelfItem]) -> List[ShelfItem]:
    """Merge two item lists into one newest-first list with one item per book.

    Reading items are inserted first and favorites second, so a favorite
    replaces the reading item for the same book whatever their timestamps.
    """
    by_book: Dict[int, ShelfItem] = {}
    for item in reading_items:
        by_book[item.book.id] = item
    for item in favorite_items:
        by_book[item.book.id] = item
    return sorted(by_book.values(), key=lambda item: item.added_at, reverse=True)

class RecencyMergeResolver(ShelfResolver):
    """Newest reading entries and favorites merged into one list.

    Only the newest ``limit * RECENT_WINDOW_MULTIPLIER`` rows of each source
    are read, and ``total`` is the size of the merged window rather than an
    exact count. Rows older than the window never appear.
    """

    def __init__(self, window_multiplier: int = RECENT_WINDOW_MULTIPLIER):
        self.window_multiplier = window_multiplier

    def _fetch_recent(self, context: ShelfContext, collection: str, project, user_id: int, cap: int) -> List[ShelfItem]:
        with context.store.read() as repos:
            rows = getattr(repos, collection).find_by_owner(user_id, sort=NEWEST_FIRST, limit=cap)
            return project_all(rows, project)

    def resolve(self, context: ShelfContext, user_id: int, window: PageWindow) -> ShelfPage:
        cap = window.limit * self.window_multiplier
        fetched = context.gather({
            "reading": lambda: self._fetch_recent(context, "readings", ShelfItem.from_reading, user_id, cap),
            "favorite": lambda: self._fetch_recent(context, "favorites", ShelfItem.from_favorite, user_id, cap),
        })
        if len(fetched["reading"]) >= cap or len(fetched["favorite"]) >= cap:
            logger.debug("Recent shelf for user %s hit the %d row window; older rows are left out", user_id, cap)

        merged = merge_by_book(fetched["reading"], fetched["favorite"])
        return ShelfPage(page=window.page, limit=window.limit, total=len(merged), items=window.slice(merged))
