# shelves/sa/models/book.py
from sqlalchemy import Integer, String, JSON, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    external_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    authors: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    cover: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    source: Mapped[str | None] = mapped_column(String(50), nullable=True, default="openlibrary")

    # Relationships
    reading_entries = relationship('ReadingEntry', back_populates='book')
    favorites = relationship('Favorite', back_populates='book')
    reviews = relationship('Review', back_populates='book')

    __table_args__ = (
        Index('idx_book_title', 'title'),
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} external_id={self.external_id!r}>"
