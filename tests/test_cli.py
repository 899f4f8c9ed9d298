# tests/test_cli.py

import pytest
from click.testing import CliRunner
from cli.main import cli
from booknet.sa.models import Book, BookTransactionHistory, User

@pytest.fixture
def run(test_db_url, database):
    runner = CliRunner()
    def _run(*args):
        return runner.invoke(cli, ['--database-url', test_db_url, *args])
    return _run

def test_user_create(run):
    result = run('user', 'create', 'alice')
    assert result.exit_code == 0
    assert "alice" in result.output

def test_user_create_duplicate(run, owner):
    result = run('user', 'create', 'Book Owner')
    assert result.exit_code == 1

def test_book_add_and_list(run, owner, borrower):
    result = run('book', 'add', '--user-id', str(owner.id), '--title', 'Solaris', '--author', 'Stanislaw Lem', '--shareable')
    assert result.exit_code == 0

    result = run('book', 'list', '--user-id', str(borrower.id))
    assert result.exit_code == 0
    assert "Solaris" in result.output

    result = run('book', 'list', '--user-id', str(owner.id))
    assert "Solaris" not in result.output

def test_toggle_forbidden(run, sample_book, borrower):
    result = run('book', 'archived', str(sample_book.id), '--user-id', str(borrower.id))
    assert result.exit_code == 1

def test_lending_cycle(run, db_session, sample_book, owner, borrower):
    book_id = str(sample_book.id)
    assert run('lend', 'borrow', book_id, '--user-id', str(borrower.id)).exit_code == 0
    assert run('lend', 'borrow', book_id, '--user-id', str(borrower.id)).exit_code == 1
    assert run('lend', 'return', book_id, '--user-id', str(borrower.id)).exit_code == 0
    assert run('lend', 'approve', book_id, '--user-id', str(owner.id), '--guard', 'legacy').exit_code == 1
    assert run('lend', 'approve', book_id, '--user-id', str(owner.id), '--guard', 'owner').exit_code == 0

    db_session.expire_all()
    record = db_session.query(BookTransactionHistory).one()
    assert record.returned is True
    assert record.return_approved is True

def test_borrow_with_unknown_user(run, db_session, sample_book):
    result = run('lend', 'borrow', str(sample_book.id), '--user-id', '999')
    assert result.exit_code == 1
    assert "No user found with ID: 999" in result.output
    assert db_session.query(BookTransactionHistory).count() == 0

def test_book_add_with_unknown_user(run, db_session):
    result = run('book', 'add', '--user-id', '999', '--title', 'Solaris', '--author', 'Stanislaw Lem')
    assert result.exit_code == 1
    assert "No user found with ID: 999" in result.output
    assert db_session.query(Book).count() == 0

def test_invalid_approval_guard_stops_cli(run, db_session, monkeypatch):
    monkeypatch.setenv("BOOKNET_APPROVAL_GUARD", "bogus")
    result = run('user', 'create', 'alice')
    assert result.exit_code == 2
    assert "Invalid BOOKNET_APPROVAL_GUARD 'bogus'" in result.output
    assert db_session.query(User).count() == 0
