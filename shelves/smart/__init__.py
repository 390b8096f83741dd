# shelves/smart/__init__.py
from .items import ItemSource, ShelfItem
from .pagination import PageWindow, ShelfPage, normalize_page
from .registry import ShelfType, ShelfDefinition, SHELF_REGISTRY, get_definition
from .summary import ShelfSummary, ShelfList
from .service import SmartShelfService

__all__ = [
    'ItemSource',
    'ShelfItem',
    'PageWindow',
    'ShelfPage',
    'normalize_page',
    'ShelfType',
    'ShelfDefinition',
    'SHELF_REGISTRY',
    'get_definition',
    'ShelfSummary',
    'ShelfList',
    'SmartShelfService'
]
