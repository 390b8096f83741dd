# shelves/sa/models/user.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class User(Base, TimestampMixin):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Relationships
    reading_entries = relationship('ReadingEntry', back_populates='user')
    favorites = relationship('Favorite', back_populates='user')
    reviews = relationship('Review', back_populates='user')
