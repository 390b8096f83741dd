# shelves/sa/repositories/reading.py
from shelves.sa.models import ReadingEntry
from .base import OwnedRecordRepository

class ReadingRepository(OwnedRecordRepository):
    """Repository for reading progress entries."""
    model = ReadingEntry
