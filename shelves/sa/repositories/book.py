# shelves/sa/repositories/book.py
from typing import Optional
from sqlalchemy.orm import Session
from shelves.sa.models import Book

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def resolve_book(self, book_id: Optional[int]) -> Optional[Book]:
        """Get the book a record points at, or None for a dangling reference."""
        if book_id is None:
            return None
        return self.session.get(Book, book_id)
