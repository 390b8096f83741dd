# shelves/sa/__init__.py
from .database import Database
from .store import RecordStore, Repositories
from .models import (
    Base, Book, User, ReadingEntry, ReadingStatus, Favorite, Review
)

__all__ = [
    'Database',
    'RecordStore',
    'Repositories',
    'Base',
    'Book',
    'User',
    'ReadingEntry',
    'ReadingStatus',
    'Favorite',
    'Review'
]
