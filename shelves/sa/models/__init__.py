# shelves/sa/models/__init__.py
from .base import Base, TimestampMixin
from .book import Book
from .user import User
from .reading import ReadingEntry, ReadingStatus
from .favorite import Favorite
from .review import Review

__all__ = [
    'Base',
    'TimestampMixin',
    'Book',
    'User',
    'ReadingEntry',
    'ReadingStatus',
    'Favorite',
    'Review'
]
