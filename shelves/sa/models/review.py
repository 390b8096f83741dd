# shelves/sa/models/review.py
from sqlalchemy import Integer, Float, Text, ForeignKey, UniqueConstraint, Index, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Review(Base, TimestampMixin):
    __tablename__ = 'review'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    user = relationship('User', back_populates='reviews')
    book = relationship('Book', back_populates='reviews')

    __table_args__ = (
        UniqueConstraint('user_id', 'book_id', name='uix_review_user_book'),
        CheckConstraint('rating >= 1 AND rating <= 5', name='ck_review_rating_range'),
        Index('idx_review_user_rating', 'user_id', 'rating', 'created_at'),
    )
