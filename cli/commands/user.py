import click
from booknet.sa.repositories.user import UserRepository
from ..utils import session_scope, handle_errors, print_success

@click.group()
def user():
    """User commands"""
    pass

@user.command()
@click.argument('name')
@click.pass_context
@handle_errors
def create(ctx, name: str):
    """Create a user called NAME"""
    with session_scope(ctx) as session:
        created = UserRepository(session).create_user(name)
        print_success("Created user", f"{created.name} (ID: {created.id})")
