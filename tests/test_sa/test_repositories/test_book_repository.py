# tests/test_sa/test_repositories/test_book_repository.py

import pytest
from booknet.sa.repositories.book import BookRepository
from booknet.exceptions import NotFoundError
from booknet.sa.models import Book

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance."""
    return BookRepository(db_session)

def test_get_by_id(book_repo, sample_book):
    fetched = book_repo.get_by_id(sample_book.id)
    assert fetched is not None
    assert fetched.title == "The Left Hand of Darkness"

def test_get_by_nonexistent_id(book_repo):
    assert book_repo.get_by_id(999) is None

def test_save_new_book(book_repo, owner):
    book = book_repo.save(Book(title="Kindred", author_name="Octavia E. Butler", owner_id=owner.id))
    assert book.id is not None
    assert book_repo.get_by_id(book.id).author_name == "Octavia E. Butler"

def test_save_updates_flags(book_repo, sample_book):
    sample_book.archived = True
    book_repo.save(sample_book)
    assert book_repo.get_by_id(sample_book.id).archived is True

def test_displayable_books_filters(book_repo, make_book, owner, borrower):
    """Only shareable, non-archived books owned by someone else are displayable"""
    visible = make_book("Visible")
    make_book("Private", shareable=False)
    make_book("Archived", archived=True)
    make_book("Borrower's own", owner_id=borrower.id)

    books = book_repo.get_displayable_books(borrower.id)
    assert [b.title for b in books] == ["Visible"]
    assert book_repo.count_displayable_books(borrower.id) == 1
    assert books[0].id == visible.id

def test_displayable_books_excludes_own(book_repo, make_book, owner):
    make_book("Mine")
    assert book_repo.get_displayable_books(owner.id) == []
    assert book_repo.count_displayable_books(owner.id) == 0

def test_displayable_books_newest_first(book_repo, make_book, borrower):
    for i in range(3):
        make_book(f"Book {i}")
    titles = [b.title for b in book_repo.get_displayable_books(borrower.id)]
    assert titles == ["Book 2", "Book 1", "Book 0"]

def test_displayable_books_pagination(book_repo, make_book, borrower):
    for i in range(5):
        make_book(f"Book {i}")
    page = book_repo.get_displayable_books(borrower.id, limit=2, offset=2)
    assert [b.title for b in page] == ["Book 2", "Book 1"]

def test_books_by_owner_include_all_flags(book_repo, make_book, owner, borrower):
    make_book("Shared")
    make_book("Private", shareable=False)
    make_book("Archived", archived=True)
    make_book("Not mine", owner_id=borrower.id)

    books = book_repo.get_books_by_owner(owner.id)
    assert {b.title for b in books} == {"Shared", "Private", "Archived"}
    assert book_repo.count_books_by_owner(owner.id) == 3

def test_save_with_unknown_owner_rolls_back(book_repo, owner):
    with pytest.raises(NotFoundError, match="No user found with ID: 999"):
        book_repo.save(Book(title="Orphan", author_name="Nobody", owner_id=999))

    # The session is usable again after the rollback
    book = book_repo.save(Book(title="Kindred", author_name="Octavia E. Butler", owner_id=owner.id))
    assert book_repo.get_by_id(book.id) is not None
