# shelves/sa/models/reading.py
from datetime import datetime
from enum import Enum
from sqlalchemy import Integer, String, Text, ForeignKey, DateTime, UniqueConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class ReadingStatus(str, Enum):
    TO_READ = "to-read"
    READING = "reading"
    FINISHED = "finished"

class ReadingEntry(Base, TimestampMixin):
    """A user's reading progress for one book."""
    __tablename__ = 'reading_entry'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default=ReadingStatus.TO_READ.value)
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # percent, 0-100
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    finished_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship('User', back_populates='reading_entries')
    book = relationship('Book', back_populates='reading_entries')

    __table_args__ = (
        UniqueConstraint('user_id', 'book_id', name='uix_reading_entry_user_book'),
        Index('idx_reading_entry_user_status', 'user_id', 'status'),
        Index('idx_reading_entry_user_created', 'user_id', 'created_at'),
    )
