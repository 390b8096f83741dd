# shelves/smart/pagination.py
from dataclasses import dataclass, field
from typing import List, Optional

from .items import ShelfItem

DEFAULT_LIMIT = 20
MAX_LIMIT = 100

@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def slice(self, items: List[ShelfItem]) -> List[ShelfItem]:
        """Apply this window to an in-memory sequence."""
        return items[self.skip:self.skip + self.limit]

@dataclass
class ShelfPage:
    """Response envelope shared by every shelf type."""
    page: int
    limit: int
    total: int
    items: List[ShelfItem] = field(default_factory=list)

def normalize_page(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT
) -> PageWindow:
    """Clamp caller supplied paging values.
    
    Args:
        page: 1-based page number; missing or < 1 becomes 1
        limit: Page size; missing uses ``default_limit``, then clamped to [1, max_limit]
        default_limit: Page size used when none is given
        max_limit: Largest page size allowed, never above MAX_LIMIT
        
    Returns:
        The normalized PageWindow
    """
    page = 1 if page is None else max(1, int(page))
    limit = default_limit if limit is None else int(limit)
    limit = min(max_limit, MAX_LIMIT, max(1, limit))
    return PageWindow(page=page, limit=limit)
