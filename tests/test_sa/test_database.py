# tests/test_sa/test_database.py

import pytest
from booknet.sa.models import User

def test_get_db_commits_on_exit(database, db_session):
    with database.get_db() as session:
        session.add(User(name="Committed"))

    assert db_session.query(User).filter(User.name == "Committed").count() == 1

def test_get_db_rolls_back_on_error(database, db_session):
    with pytest.raises(RuntimeError):
        with database.get_db() as session:
            session.add(User(name="Rolled Back"))
            session.flush()
            raise RuntimeError("boom")

    assert db_session.query(User).filter(User.name == "Rolled Back").count() == 0
