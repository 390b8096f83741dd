# shelves/sa/store.py
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shelves.errors import StoreUnavailable
from shelves.sa.database import Database
from shelves.sa.repositories import BookRepository, ReadingRepository, FavoriteRepository, ReviewRepository

logger = logging.getLogger(__name__)

@dataclass
class Repositories:
    """The per-entity repositories bound to one session."""
    session: Session
    books: BookRepository
    readings: ReadingRepository
    favorites: FavoriteRepository
    reviews: ReviewRepository

class RecordStore:
    """Read-only access to the owned record collections.

    Each call to :meth:`read` opens its own session, so independent reads can
    run on separate threads at the same time.
    """

    def __init__(self, database: Database):
        self.database = database

    @contextmanager
    def read(self) -> Iterator[Repositories]:
        """Open a session for one read and yield repositories bound to it.

        Raises:
            StoreUnavailable: If the underlying query fails
        """
        session = self.database.get_session()
        try:
            yield Repositories(
                session=session,
                books=BookRepository(session),
                readings=ReadingRepository(session),
                favorites=FavoriteRepository(session),
                reviews=ReviewRepository(session),
            )
        except SQLAlchemyError as e:
            logger.error("Record store read failed: %s", e)
            raise StoreUnavailable(str(e)) from e
        finally:
            session.close()
