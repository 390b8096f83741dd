# shelves/sa/repositories/review.py
from shelves.sa.models import Review
from .base import OwnedRecordRepository

class ReviewRepository(OwnedRecordRepository):
    """Repository for book reviews."""
    model = Review
