# shelves/sa/models/favorite.py
from sqlalchemy import Integer, Text, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Favorite(Base, TimestampMixin):
    __tablename__ = 'favorite'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    user = relationship('User', back_populates='favorites')
    book = relationship('Book', back_populates='favorites')

    __table_args__ = (
        # one favorite per user and book
        UniqueConstraint('user_id', 'book_id', name='uix_favorite_user_book'),
        Index('idx_favorite_user_created', 'user_id', 'created_at'),
    )
