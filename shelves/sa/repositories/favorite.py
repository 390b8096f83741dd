# shelves/sa/repositories/favorite.py
from shelves.sa.models import Favorite
from .base import OwnedRecordRepository

class FavoriteRepository(OwnedRecordRepository):
    """Repository for favorited books."""
    model = Favorite
