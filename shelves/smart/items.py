# shelves/smart/items.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional

from shelves.sa.models import Book, ReadingEntry, Favorite, Review

class ItemSource(str, Enum):
    READING = "reading"
    FAVORITE = "favorite"
    REVIEW = "review"

@dataclass
class ShelfItem:
    """One book on a smart shelf, projected from the record it came from.

    Only the fields belonging to ``source`` are set; the rest stay None.
    """
    source: ItemSource
    added_at: datetime
    book: Book

    # reading
    reading_id: Optional[int] = None
    status: Optional[str] = None
    progress: Optional[int] = None
    updated_at: Optional[datetime] = None

    # favorite
    favorite_id: Optional[int] = None
    note: Optional[str] = None

    # review
    review_id: Optional[int] = None
    rating: Optional[float] = None
    text: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_reading(cls, entry: ReadingEntry) -> "ShelfItem":
        return cls(
            source=ItemSource.READING,
            added_at=entry.created_at,
            book=entry.book,
            reading_id=entry.id,
            status=entry.status,
            progress=entry.progress,
            updated_at=entry.updated_at,
        )

    @classmethod
    def from_favorite(cls, favorite: Favorite) -> "ShelfItem":
        return cls(
            source=ItemSource.FAVORITE,
            added_at=favorite.created_at,
            book=favorite.book,
            favorite_id=favorite.id,
            note=favorite.note,
        )

    @classmethod
    def from_review(cls, review: Review) -> "ShelfItem":
        return cls(
            source=ItemSource.REVIEW,
            added_at=review.created_at,
            book=review.book,
            review_id=review.id,
            rating=review.rating,
            text=review.text,
            created_at=review.created_at,
        )

def project_all(records: Iterable[Any], project: Callable[[Any], ShelfItem]) -> List[ShelfItem]:
    """Project records to shelf items, dropping records whose book is gone."""
    return [project(record) for record in records if record.book is not None]
