# shelves/smart/service.py
import logging
from typing import Optional, Union

from shelves.config import Settings
from shelves.sa.database import Database
from shelves.sa.store import RecordStore
from .context import ShelfContext
from .pagination import ShelfPage, normalize_page
from .registry import ShelfType, get_definition
from .summary import ShelfList, ShelfSummaryAggregator

logger = logging.getLogger(__name__)

class SmartShelfService:
    """Read-only virtual shelves computed from a user's reading entries,
    favorites and reviews. Nothing computed here is stored."""

    def __init__(self, store: RecordStore, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self.context = ShelfContext(store=store, max_workers=self.settings.max_workers)
        self.aggregator = ShelfSummaryAggregator(self.context)

    @classmethod
    def from_database(cls, database: Database, settings: Optional[Settings] = None) -> "SmartShelfService":
        return cls(RecordStore(database), settings)

    def list_shelves(self, user_id: int) -> ShelfList:
        """Get every shelf type with its item count and a sample book.
        
        Args:
            user_id: The verified owner of the records
            
        Returns:
            ShelfList with one summary per registered shelf type
            
        Raises:
            StoreUnavailable: If any of the underlying reads fails
        """
        return self.aggregator.summarize(user_id)

    def get_shelf(
        self,
        user_id: int,
        shelf_type: Union[str, ShelfType],
        page: Optional[int] = None,
        limit: Optional[int] = None
    ) -> ShelfPage:
        """Get one page of a smart shelf.
        
        Args:
            user_id: The verified owner of the records
            shelf_type: One of the registered shelf keys
            page: 1-based page number (clamped to >= 1)
            limit: Page size (defaults and clamps come from settings)
            
        Returns:
            ShelfPage with page, limit, total and items
            
        Raises:
            InvalidShelfType: If ``shelf_type`` is not registered
            StoreUnavailable: If any of the underlying reads fails
        """
        definition = get_definition(shelf_type)
        window = normalize_page(
            page,
            limit,
            default_limit=self.settings.default_limit,
            max_limit=self.settings.max_limit
        )
        logger.debug("Resolving %s shelf for user %s (page=%d, limit=%d)",
                     definition.key.value, user_id, window.page, window.limit)
        return definition.resolver.resolve(self.context, user_id, window)
