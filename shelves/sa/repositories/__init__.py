# shelves/sa/repositories/__init__.py
from .base import OwnedRecordRepository
from .book import BookRepository
from .reading import ReadingRepository
from .favorite import FavoriteRepository
from .review import ReviewRepository

__all__ = [
    'OwnedRecordRepository',
    'BookRepository',
    'ReadingRepository',
    'FavoriteRepository',
    'ReviewRepository'
]
