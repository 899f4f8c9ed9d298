import functools
from contextlib import contextmanager
from typing import Iterator

import click
from sqlalchemy.orm import Session

from booknet.exceptions import BookNetworkError, NotFoundError
from booknet.identity import ActingUser
from booknet.sa.database import Database
from booknet.sa.repositories.user import UserRepository

def get_db(ctx: click.Context) -> Database:
    """Database configured on the root command"""
    return ctx.find_root().obj["db"]

@contextmanager
def session_scope(ctx: click.Context) -> Iterator[Session]:
    with get_db(ctx).get_db() as session:
        yield session

def resolve_acting_user(session: Session, user_id: int) -> ActingUser:
    """Look up --user-id and wrap it as the acting user.

    Raises:
        NotFoundError: If no user has the given ID
    """
    if UserRepository(session).get_by_id(user_id) is None:
        raise NotFoundError(f"No user found with ID: {user_id}")
    return ActingUser(user_id)

def print_error(message: str) -> None:
    click.echo(click.style(f"Error: {message}", fg='red'), err=True)

def print_success(label: str, value) -> None:
    click.echo(click.style(f"{label}: ", fg='green') + click.style(str(value), fg='cyan'))

def handle_errors(func):
    """Report service errors in red and exit with status 1"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (BookNetworkError, ValueError) as e:
            print_error(str(e))
            raise SystemExit(1)
    return wrapper
