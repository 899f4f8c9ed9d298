# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from booknet.identity import ActingUser
from booknet.sa.database import Database
from booknet.sa.models import Base, User, Book

@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_books.db'}"

@pytest.fixture(scope="session")
def database(test_db_url):
    """Create a test database instance"""
    db = Database(test_db_url)

    # Drop all tables and recreate schema
    db.drop_db()
    db.init_db()

    yield db

    db.engine.dispose()

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
    for table in reversed(Base.metadata.sorted_tables):
        db_session.execute(table.delete())
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def owner(db_session):
    """User who owns the sample book."""
    user = User(name="Book Owner")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def borrower(db_session):
    user = User(name="Book Borrower")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def other_user(db_session):
    user = User(name="Someone Else")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def owner_user(owner):
    return ActingUser(owner.id)

@pytest.fixture
def borrower_user(borrower):
    return ActingUser(borrower.id)

@pytest.fixture
def sample_book(db_session, owner):
    """A shareable, non-archived book."""
    book = Book(
        title="The Left Hand of Darkness",
        author_name="Ursula K. Le Guin",
        isbn="9780441478125",
        synopsis="An envoy visits the planet Gethen.",
        shareable=True,
        archived=False,
        owner_id=owner.id
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def make_book(db_session, owner):
    """Factory for books with custom flags."""
    def _make(title="Book", shareable=True, archived=False, owner_id=None):
        book = Book(
            title=title,
            author_name="Test Author",
            shareable=shareable,
            archived=archived,
            owner_id=owner_id if owner_id is not None else owner.id
        )
        db_session.add(book)
        db_session.commit()
        return book
    return _make
