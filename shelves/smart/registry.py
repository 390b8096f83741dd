# shelves/smart/registry.py
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from shelves.errors import InvalidShelfType
from shelves.sa.models import ReadingStatus
from .resolvers import (
    ShelfResolver, RecencyMergeResolver, status_shelf, favorites_shelf, top_rated_shelf
)

class ShelfType(str, Enum):
    FINISHED = "finished"
    READING = "reading"
    TO_READ = "to-read"
    FAVORITES = "favorites"
    TOP_RATED = "top-rated"
    RECENT = "recent"

    @classmethod
    def parse(cls, value: Union[str, "ShelfType"]) -> "ShelfType":
        """Look up a shelf type by its key.

        Raises:
            InvalidShelfType: If ``value`` is not a registered key
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidShelfType(value) from None

@dataclass(frozen=True)
class ShelfDefinition:
    key: ShelfType
    title: str
    resolver: ShelfResolver

# Display order of the shelf list
SHELF_REGISTRY: Mapping[ShelfType, ShelfDefinition] = MappingProxyType({
    ShelfType.FINISHED: ShelfDefinition(ShelfType.FINISHED, "Finished", status_shelf(ReadingStatus.FINISHED.value)),
    ShelfType.READING: ShelfDefinition(ShelfType.READING, "Reading", status_shelf(ReadingStatus.READING.value)),
    ShelfType.TO_READ: ShelfDefinition(ShelfType.TO_READ, "To Read", status_shelf(ReadingStatus.TO_READ.value)),
    ShelfType.FAVORITES: ShelfDefinition(ShelfType.FAVORITES, "Favorites", favorites_shelf()),
    ShelfType.TOP_RATED: ShelfDefinition(ShelfType.TOP_RATED, "Top Rated", top_rated_shelf()),
    ShelfType.RECENT: ShelfDefinition(ShelfType.RECENT, "Recently Added", RecencyMergeResolver()),
})

def get_definition(shelf_type: Union[str, ShelfType]) -> ShelfDefinition:
    return SHELF_REGISTRY[ShelfType.parse(shelf_type)]
