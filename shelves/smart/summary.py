# shelves/smart/summary.py
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from shelves.sa.models import Book
from .context import ShelfContext
from .registry import SHELF_REGISTRY, ShelfType
from .resolvers import NEWEST_FIRST

logger = logging.getLogger(__name__)

LATEST_READING = "latest_reading"
LATEST_FAVORITE = "latest_favorite"

@dataclass
class ShelfSummary:
    key: ShelfType
    title: str
    count: Optional[int] = None
    sample_book: Optional[Book] = None

@dataclass
class ShelfList:
    shelves: List[ShelfSummary] = field(default_factory=list)

class ShelfSummaryAggregator:
    """Builds the shelf overview for one user.

    Every count and both "latest" lookups are independent reads issued at the
    same time. The sample book for the recent shelf is the book of the newest
    reading entry whose book still exists. The newest favorite's book is used
    only when no such reading entry exists.
    """

    def __init__(self, context: ShelfContext):
        self.context = context

    def _latest_book(self, collection: str, user_id: int) -> Optional[Book]:
        with self.context.store.read() as repos:
            record = getattr(repos, collection).find_one(user_id, sort=NEWEST_FIRST)
            if record is None:
                return None
            return repos.books.resolve_book(record.book_id)

    def _tasks(self, user_id: int) -> Dict[Any, Callable[[], Any]]:
        tasks: Dict[Any, Callable[[], Any]] = {}
        for key, definition in SHELF_REGISTRY.items():
            if definition.resolver.exact_count:
                tasks[key] = lambda resolver=definition.resolver: resolver.count(self.context, user_id)
        tasks[LATEST_READING] = lambda: self._latest_book("readings", user_id)
        tasks[LATEST_FAVORITE] = lambda: self._latest_book("favorites", user_id)
        return tasks

    def summarize(self, user_id: int) -> ShelfList:
        results = self.context.gather(self._tasks(user_id))
        sample_book = results[LATEST_READING] or results[LATEST_FAVORITE]

        shelves = []
        for key, definition in SHELF_REGISTRY.items():
            summary = ShelfSummary(key=key, title=definition.title, count=results.get(key))
            if key is ShelfType.RECENT:
                summary.sample_book = sample_book
            shelves.append(summary)

        logger.debug("Summarized %d shelves for user %s", len(shelves), user_id)
        return ShelfList(shelves=shelves)
