# tests/conftest.py
import sys
import pytest
from pathlib import Path
from datetime import datetime, timedelta, UTC
from sqlalchemy.sql import text
from sqlalchemy.orm import Session

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from shelves.config import Settings
from shelves.sa.database import Database
from shelves.sa.models import Base, Book, User, ReadingEntry, Favorite, Review
from shelves.sa.store import RecordStore
from shelves.smart import SmartShelfService

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

def at(minutes: int) -> datetime:
    """A timestamp ``minutes`` after BASE_TIME"""
    return BASE_TIME + timedelta(minutes=minutes)

@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory):
    """File backed SQLite so worker threads share the same data."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_shelves.db'}"

@pytest.fixture(scope="session")
def database(test_db_url):
    """Create a test database instance"""
    db = Database(test_db_url)
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)
    yield db
    db.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    db_session.execute(text("DELETE FROM review"))
    db_session.execute(text("DELETE FROM favorite"))
    db_session.execute(text("DELETE FROM reading_entry"))
    db_session.execute(text("DELETE FROM book"))
    db_session.execute(text('DELETE FROM "user"'))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def settings(test_db_url):
    return Settings(database_url=test_db_url, max_workers=4)

@pytest.fixture
def store(database):
    return RecordStore(database)

@pytest.fixture
def service(store, settings):
    return SmartShelfService(store, settings)

@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _make_user(name=None):
        counter["n"] += 1
        user = User(name=name or f"Test User {counter['n']}")
        db_session.add(user)
        db_session.commit()
        return user
    return _make_user

@pytest.fixture
def make_book(db_session):
    counter = {"n": 0}

    def _make_book(title=None, authors=None):
        counter["n"] += 1
        n = counter["n"]
        book = Book(
            external_id=f"/works/OL{n}W",
            title=title or f"Test Book {n}",
            authors=authors if authors is not None else [f"Test Author {n}"],
            cover=f"http://example.com/cover_{n}.jpg"
        )
        db_session.add(book)
        db_session.commit()
        return book
    return _make_book

@pytest.fixture
def add_reading(db_session):
    def _add_reading(user, book, status="reading", created=0, updated=None, progress=0):
        entry = ReadingEntry(
            user_id=user.id,
            book_id=book.id,
            status=status,
            progress=progress,
            created_at=at(created),
            updated_at=at(created if updated is None else updated)
        )
        db_session.add(entry)
        db_session.commit()
        return entry
    return _add_reading

@pytest.fixture
def add_favorite(db_session):
    def _add_favorite(user, book, created=0, note=""):
        favorite = Favorite(
            user_id=user.id,
            book_id=book.id,
            note=note,
            created_at=at(created),
            updated_at=at(created)
        )
        db_session.add(favorite)
        db_session.commit()
        return favorite
    return _add_favorite

@pytest.fixture
def add_review(db_session):
    def _add_review(user, book, rating, created=0, text=""):
        review = Review(
            user_id=user.id,
            book_id=book.id,
            rating=rating,
            text=text,
            created_at=at(created),
            updated_at=at(created)
        )
        db_session.add(review)
        db_session.commit()
        return review
    return _add_review

@pytest.fixture
def sample_user(make_user):
    """Create a sample user for testing."""
    return make_user("Test User")

@pytest.fixture
def other_user(make_user):
    return make_user("Other User")
