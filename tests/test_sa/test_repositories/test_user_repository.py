# tests/test_sa/test_repositories/test_user_repository.py

import pytest
from booknet.sa.repositories.user import UserRepository

@pytest.fixture
def user_repo(db_session):
    return UserRepository(db_session)

def test_create_user(user_repo):
    user = user_repo.create_user(name="John Doe")
    assert user.id is not None
    assert user.name == "John Doe"

def test_create_duplicate_user(user_repo, owner):
    with pytest.raises(ValueError, match="User with name 'Book Owner' already exists"):
        user_repo.create_user(name="Book Owner")

def test_get_by_id(user_repo, owner):
    assert user_repo.get_by_id(owner.id).name == "Book Owner"
    assert user_repo.get_by_id(999) is None

def test_get_by_name(user_repo, owner):
    assert user_repo.get_by_name("Book Owner").id == owner.id
    assert user_repo.get_by_name("Nobody") is None
